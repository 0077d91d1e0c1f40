'''
Errors raised while configuring or starting the preview server.
Per-request serving problems are not exceptions; see core/static.py.
'''


class LivePreviewError(Exception):
    """Base class for every error this package raises."""


class PathResolutionError(LivePreviewError):
    def __init__(self, raw_path, detail=""):
        self.raw_path = raw_path
        self.detail = detail
        super().__init__(f"{raw_path!r}: {detail}" if detail else repr(raw_path))


class MissingInput(PathResolutionError):
    def __init__(self, raw_path=None):
        super().__init__(raw_path, "no directory path supplied")


class AccessError(PathResolutionError):
    pass


class NotADirectory(PathResolutionError):
    pass


class BindFailure(LivePreviewError):
    """The listening port is already taken."""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        super().__init__(f"Port {port} is already in use on {host}")
