"""Read and write rclone's INI dialect."""

from .errors import ParseError


INDENT = "  "
COMMENT_PREFIXES = ("#", ";")


def format_value(value) -> str:
    """Render an option value the way rclone spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def serialize_remotes(remotes: dict) -> str:
    """Serialize remote name -> options into rclone.conf text.

    Each remote becomes a ``[name]`` header, one indented ``key = value``
    line per option and a trailing blank line. Sections are emitted in the
    mapping's iteration order.
    """
    lines = []
    for name, options in remotes.items():
        lines.append(f"[{name}]\n")
        for key, value in options.items():
            lines.append(f"{INDENT}{key} = {format_value(value)}\n")
        lines.append("\n")
    return "".join(lines)


def parse_ini(text: str) -> dict:
    """Parse rclone.conf text back into remote name -> options.

    All values come back as strings. Comment and blank lines are skipped.
    Everything after ``=`` is the value, less the single space the
    serializer puts there, so surrounding whitespace in values survives.
    """
    remotes = {}
    current = None

    for lineno, raw in enumerate(text.split("\n"), start=1):
        if raw.endswith("\r"):
            raw = raw[:-1]
        line = raw.lstrip()
        if not line.strip() or line.startswith(COMMENT_PREFIXES):
            continue

        header = line.rstrip()
        if header.startswith("[") and header.endswith("]"):
            name = header[1:-1]
            if name in remotes:
                raise ParseError(f"line {lineno}: duplicate section [{name}]")
            current = remotes[name] = {}
            continue

        if current is None:
            raise ParseError(f"line {lineno}: option outside of any section")

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ParseError(f"line {lineno}: expected 'key = value', got {raw!r}")
        if value.startswith(" "):
            value = value[1:]
        current[key] = value

    return remotes
