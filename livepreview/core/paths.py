import os
import stat

from livepreview.core.errors import AccessError, MissingInput, NotADirectory


def resolve_directory(raw_path) -> str:
    """
    Turn a user-supplied directory string into an absolute path to an existing directory.

    - Empty or missing input fails before the filesystem is touched.
    - Relative paths are resolved against the server's working directory,
      not the client's.
    - A single os.stat decides the outcome; nothing is created or retried.
    """
    if not raw_path:
        raise MissingInput(raw_path)

    absolute_path = os.path.abspath(raw_path)

    try:
        st = os.stat(absolute_path)
    except (OSError, ValueError) as e:
        # ValueError covers embedded NUL bytes
        raise AccessError(raw_path, str(e)) from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectory(raw_path, f"{absolute_path} is not a directory")

    return absolute_path
