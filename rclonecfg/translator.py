"""Import a JSON remote list into rclone.conf, and export it back out."""

import json
import shutil
from pathlib import Path

from . import DEFAULT_EXPORT, DEFAULT_SOURCE
from .errors import LoadError, NotFoundError, WriteError
from .ini_format import parse_ini, serialize_remotes
from .loader import load_remotes
from .paths import HostEnvironment, rclone_config_path
from .utils import log
from .writer import write_config


def live_config_path(env: HostEnvironment | None = None) -> Path:
    """Get the rclone.conf location as a concrete path on this host."""
    return Path(rclone_config_path(env))


def import_config(
    source: str | Path = DEFAULT_SOURCE,
    destination: str | Path | None = None,
    env: HostEnvironment | None = None,
) -> Path:
    """Translate the JSON document at ``source`` into rclone.conf.

    Args:
        source: JSON file of remote name -> options
        destination: Where to write; defaults to rclone's own config path
        env: Host environment used to resolve the default destination

    Returns the path that was written. Nothing is written if loading or
    path resolution fails.
    """
    remotes = load_remotes(source)
    text = serialize_remotes(remotes)

    if destination is None:
        destination = live_config_path(env)

    path = write_config(destination, text)
    log(f"Wrote {len(remotes)} remote(s) to {path}: {', '.join(remotes) or '-'}")
    return path


def export_config(
    target: str | Path = DEFAULT_EXPORT,
    env: HostEnvironment | None = None,
) -> Path:
    """Copy the live rclone.conf to ``target``."""
    source = live_config_path(env)
    target = Path(target)

    if not source.is_file():
        raise NotFoundError(f"No rclone config at {source}")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as e:
        raise WriteError(f"Could not copy {source} to {target}: {e}") from e

    log(f"Exported {source} to {target}")
    return target


def export_json(
    target: str | Path = DEFAULT_SOURCE,
    env: HostEnvironment | None = None,
) -> Path:
    """Convert the live rclone.conf into a JSON file ``import_config`` accepts."""
    source = live_config_path(env)

    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise NotFoundError(f"No rclone config at {source}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not read {source}: {e}") from e

    remotes = parse_ini(text)
    path = write_config(target, json.dumps(remotes, indent=2) + "\n")
    log(f"Exported {len(remotes)} remote(s) from {source} to {path}")
    return path
