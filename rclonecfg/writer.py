"""Write rclone.conf to disk."""

from pathlib import Path

from .errors import WriteError


def write_config(path: str | Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories as needed.

    An existing file is replaced. Text that cannot be encoded is refused
    before the file is opened. The write itself is not atomic: a failure part
    way through can leave a truncated file behind.
    """
    path = Path(path)

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise WriteError(f"Could not encode config for {path}: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"Could not write {path}: {e}") from e

    return path
