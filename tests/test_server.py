import socket

import pytest

from livepreview.core.errors import BindFailure
from livepreview.server import bind_socket, main, parse_args


@pytest.fixture
def busy_port():
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    blocker.bind(("127.0.0.1", 0))
    blocker.listen(1)
    yield blocker.getsockname()[1]
    blocker.close()


def test_bind_free_port():
    sock = bind_socket("127.0.0.1", 0)
    try:
        assert sock.getsockname()[0] == "127.0.0.1"
    finally:
        sock.close()


def test_bind_busy_port(busy_port):
    with pytest.raises(BindFailure) as info:
        bind_socket("127.0.0.1", busy_port)
    assert info.value.port == busy_port


def test_main_exits_when_port_taken(busy_port, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--port", str(busy_port)])
    assert info.value.code == 1
    assert "already in use" in capsys.readouterr().err


def test_defaults(monkeypatch):
    monkeypatch.delenv("LIVEPREVIEW_PORT", raising=False)
    assert parse_args([]).port == 8080


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("LIVEPREVIEW_PORT", "9001")
    assert parse_args([]).port == 9001
    assert parse_args(["--port", "9002"]).port == 9002


def test_bad_port_in_environment_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("LIVEPREVIEW_PORT", "eighty")
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == 2
    assert "LIVEPREVIEW_PORT must be a port number" in capsys.readouterr().err


def test_port_out_of_range(monkeypatch):
    monkeypatch.delenv("LIVEPREVIEW_PORT", raising=False)
    with pytest.raises(SystemExit):
        parse_args(["--port", "70000"])


def test_host_cannot_be_chosen():
    with pytest.raises(SystemExit):
        parse_args(["--host", "0.0.0.0"])
