"""Local static file server with a runtime-configurable root for live preview."""

__version__ = "0.1.0"
