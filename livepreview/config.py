'''
Server settings. LIVEPREVIEW_PORT overrides the default port; serve.py's
--port flag overrides both.
'''

# Loopback only: /setup is unauthenticated, so the server must never be reachable from the network.
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
PORT_ENV = "LIVEPREVIEW_PORT"

# Tried in order when a directory is requested
INDEX_FILES = ("index.html", "index.htm")

FALLBACK_MEDIA_TYPE = "application/octet-stream"
NO_STORE = "no-store, no-cache, must-revalidate"

NOT_CONFIGURED_MESSAGE = "Server not configured. Send path via PATCH /setup."
