"""Load the JSON remote list."""

import json
from pathlib import Path

from . import DEFAULT_SOURCE
from .errors import LoadError, NotFoundError, ParseError
from .utils import log


SCALAR_TYPES = (str, int, float, bool, type(None))
LINE_BREAKS = ("\n", "\r")


def _unique_object(pairs: list) -> dict:
    """object_pairs_hook that refuses repeated keys instead of keeping the last."""
    result = {}
    for key, value in pairs:
        if key in result:
            raise ParseError(f"duplicate key {key!r}")
        result[key] = value
    return result


def _encodable(text: str) -> bool:
    # JSON allows lone surrogates like "\ud800", which cannot be written as UTF-8
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _check_name(name: str) -> str | None:
    """Return why ``name`` cannot be an INI section header, or None."""
    if not _encodable(name):
        return "is not valid unicode"
    if "]" in name or any(c in name for c in LINE_BREAKS):
        return "must not contain ']' or a line break"
    return None


def _check_key(key: str) -> str | None:
    """Return why ``key`` cannot be an option name, or None."""
    if not _encodable(key):
        return "is not valid unicode"
    if not key or key != key.strip():
        return "must be non-empty without surrounding whitespace"
    if key.startswith(("#", ";", "[")):
        return "must not start with '#', ';' or '['"
    if "=" in key or any(c in key for c in LINE_BREAKS):
        return "must not contain '=' or a line break"
    return None


def _check_value(value) -> str | None:
    """Return why ``value`` cannot be an option value, or None."""
    if not isinstance(value, SCALAR_TYPES):
        return f"must be a scalar, got {type(value).__name__}"
    if isinstance(value, str):
        if not _encodable(value):
            return "is not valid unicode"
        if any(c in value for c in LINE_BREAKS):
            return "must not contain a line break"
    return None


def parse_remotes(text: str, source: str = "<string>") -> dict:
    """Parse JSON text into an ordered mapping of remote name -> options.

    The document must be an object whose values are objects of scalars.
    Remote names, option keys and values must be writable as rclone.conf
    lines. Remote and option order follow the document.
    """
    try:
        data = json.loads(text, object_pairs_hook=_unique_object)
    except ParseError as e:
        raise ParseError(f"{source}: {e}") from None
    except json.JSONDecodeError as e:
        raise ParseError(f"{source}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"{source}: expected an object of remotes, got {type(data).__name__}"
        )

    for name, options in data.items():
        problem = _check_name(name)
        if problem:
            raise ParseError(f"{source}: remote name {name!r} {problem}")
        if not isinstance(options, dict):
            raise ParseError(
                f"{source}: remote {name!r} must be an object, got {type(options).__name__}"
            )
        for key, value in options.items():
            problem = _check_key(key)
            if problem:
                raise ParseError(f"{source}: option key {name}.{key!r} {problem}")
            problem = _check_value(value)
            if problem:
                raise ParseError(f"{source}: option {name}.{key} {problem}")

    return data


def load_remotes(path: str | Path = DEFAULT_SOURCE) -> dict:
    """Read and parse the remote list at ``path``."""
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise NotFoundError(f"Source file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not read {path}: {e}") from e

    remotes = parse_remotes(text, source=str(path))
    log(f"Loaded {len(remotes)} remote(s) from {path}")
    return remotes
