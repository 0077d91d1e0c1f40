'''
Starts the preview server on a single loopback socket.
A taken port is fatal: the process reports it and exits with status 1.
'''
import argparse
import errno
import os
import socket
import sys

import uvicorn

from livepreview.api.main import create_app
from livepreview.config import DEFAULT_HOST, DEFAULT_PORT, PORT_ENV
from livepreview.core.errors import BindFailure


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    # Lets a restarted server reclaim the port from TIME_WAIT; a live listener still blocks it
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            raise BindFailure(host, port) from e
        raise
    return sock


def parse_args(argv=None):
    # No --host flag: binding anywhere but loopback would expose /setup to the network
    parser = argparse.ArgumentParser(description="Serve a directory chosen at runtime via PATCH /setup")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to bind (default: ${PORT_ENV} or {DEFAULT_PORT})",
    )
    args = parser.parse_args(argv)

    if args.port is None:
        raw = os.environ.get(PORT_ENV)
        if raw is None:
            args.port = DEFAULT_PORT
        else:
            try:
                args.port = int(raw)
            except ValueError:
                parser.error(f"{PORT_ENV} must be a port number, got {raw!r}")
    if not 0 <= args.port <= 65535:
        parser.error(f"port must be between 0 and 65535, got {args.port}")
    return args


def main(argv=None) -> None:
    args = parse_args(argv)

    try:
        sock = bind_socket(DEFAULT_HOST, args.port)
    except BindFailure as e:
        print(f"❌ Error: {e}.", file=sys.stderr)
        print("   Stop whatever is using it or pick another port with --port.", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error starting server: {e}", file=sys.stderr)
        sys.exit(1)

    app = create_app()
    host, port = sock.getsockname()[:2]

    print(f"\n--- LIVE PREVIEW SERVER ONLINE ---")
    print(f"Listening on http://{host}:{port}")
    print("Waiting for the editor to configure a directory via PATCH /setup...")
    print(f"----------------------------------\n")

    server = uvicorn.Server(uvicorn.Config(app, log_level="info"))
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        print("\nStopping server.")
    finally:
        sock.close()


if __name__ == "__main__":
    main()
