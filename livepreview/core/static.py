'''
Resolves a request path against the active serving root.

serve() never raises for filesystem trouble: every request ends in one of the
outcome values below, which the HTTP layer maps to a response.
'''
import mimetypes
import os
import posixpath
import stat
from dataclasses import dataclass
from typing import Optional, Union

from livepreview.config import FALLBACK_MEDIA_TYPE, INDEX_FILES


@dataclass(frozen=True)
class Served:
    """A regular file inside the root, already resolved to its real path."""
    path: str
    media_type: str


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class NotConfigured:
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Forbidden:
    pass


FileServeOutcome = Union[Served, Redirect, NotConfigured, NotFound, Forbidden]


def guess_media_type(path: str) -> str:
    media_type, _ = mimetypes.guess_type(path)
    return media_type or FALLBACK_MEDIA_TYPE


def normalize_request_path(request_path: str) -> Optional[str]:
    """
    Collapse '.', '..' and duplicate slashes in a URL path.
    Returns the path relative to the root ('' for the root itself),
    or None when it climbs above the root.
    """
    path = request_path.replace("\\", "/").lstrip("/")
    if not path:
        return ""
    normalized = posixpath.normpath(path)
    if normalized == ".":
        return ""
    if normalized == ".." or normalized.startswith("../"):
        return None
    return normalized


def is_hidden(relative_path: str) -> bool:
    return any(part.startswith(".") for part in relative_path.split("/") if part)


def _is_within(real_root: str, path: str) -> bool:
    return os.path.commonpath([real_root, path]) == real_root


def _regular_file(real_root: str, path: str) -> Optional[Served]:
    # Symlinks are followed, but only to targets that stay inside the root
    real_path = os.path.realpath(path)
    if not _is_within(real_root, real_path):
        return None
    try:
        st = os.stat(real_path)
    except OSError:
        return None
    if not stat.S_ISREG(st.st_mode):
        return None
    return Served(path=real_path, media_type=guess_media_type(real_path))


def serve(root: Optional[str], request_path: str) -> FileServeOutcome:
    if root is None:
        return NotConfigured()

    relative = normalize_request_path(request_path)
    if relative is None:
        return Forbidden()
    # Dotfiles are ignored rather than refused
    if is_hidden(relative):
        return NotFound()

    try:
        real_root = os.path.realpath(root)
        target = os.path.realpath(os.path.join(real_root, *relative.split("/")))
        if not _is_within(real_root, target):
            return Forbidden()

        st = os.stat(target)
        if stat.S_ISDIR(st.st_mode):
            # Relative links in an index page only work under a trailing slash
            if relative and not request_path.endswith("/"):
                # Collapse leading slashes so the target never reads as //other-host
                return Redirect(location="/" + request_path.lstrip("/") + "/")
            for index_name in INDEX_FILES:
                served = _regular_file(real_root, os.path.join(target, index_name))
                if served is not None:
                    return served
            return NotFound()

        served = _regular_file(real_root, target)
    except (OSError, ValueError):
        # Vanished files, permission errors, NUL bytes, mixed drives on Windows
        return NotFound()

    return served if served is not None else NotFound()
