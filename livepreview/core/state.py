import threading
from typing import Optional


class ActiveRootStore:
    """
    Holds the directory currently being served, or None when serving is disabled.

    The value is a plain string swapped in a single assignment, so readers
    never lock and never see half of an update. Writers take a lock only to
    queue up behind each other.
    """

    def __init__(self, root: Optional[str] = None):
        self._root = root
        self._write_lock = threading.Lock()

    def get(self) -> Optional[str]:
        return self._root

    def set(self, root: Optional[str]) -> None:
        with self._write_lock:
            self._root = root

    @property
    def is_configured(self) -> bool:
        return self._root is not None
