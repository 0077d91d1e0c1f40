import sys

from livepreview.core.errors import MissingInput, PathResolutionError
from livepreview.core.paths import resolve_directory
from livepreview.core.state import ActiveRootStore


def reconfigure(store: ActiveRootStore, directory_path) -> str:
    """
    Point the store at a new directory and return its absolute path.

    Any resolution failure switches serving off before re-raising, so an old
    root is never left active after a bad request. Missing input is rejected
    without changing the store.
    """
    if not directory_path:
        raise MissingInput(directory_path)

    try:
        absolute_path = resolve_directory(directory_path)
    except PathResolutionError as e:
        store.set(None)
        print(f"❌ Could not serve {directory_path}: {e.detail}", file=sys.stderr)
        print("   Static serving disabled until the next successful PATCH /setup.", file=sys.stderr)
        raise

    store.set(absolute_path)
    print(f"✅ Now serving: {absolute_path}")
    return absolute_path
