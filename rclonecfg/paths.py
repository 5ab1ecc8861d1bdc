"""Locate rclone.conf for the host operating system."""

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from .errors import ConfigPathError


WINDOWS = "Windows"
RCLONE_CONF_PARTS = ("rclone", "rclone.conf")


@dataclass(frozen=True)
class HostEnvironment:
    """The bits of process state that decide where rclone.conf lives."""

    platform: str
    home_dir: str | None = None
    app_data_dir: str | None = None

    @classmethod
    def from_os(cls, environ: Mapping[str, str] | None = None) -> "HostEnvironment":
        """Read the platform name and the home/app-data variables."""
        if environ is None:
            environ = os.environ

        return cls(
            platform=platform.system(),
            # USERPROFILE covers shells that do not export HOME
            home_dir=environ.get("HOME") or environ.get("USERPROFILE"),
            app_data_dir=environ.get("APPDATA"),
        )


def rclone_config_path(env: HostEnvironment | None = None) -> PurePath:
    """Get the absolute path rclone reads its config from.

    Windows: <APPDATA>\\rclone\\rclone.conf
    Others:  <HOME>/.config/rclone/rclone.conf

    The path flavour follows ``env.platform`` rather than the running
    interpreter, so a Windows path can be computed on Linux and vice versa.
    """
    if env is None:
        env = HostEnvironment.from_os()

    if env.platform == WINDOWS:
        if not env.app_data_dir:
            raise ConfigPathError("APPDATA environment variable not set")
        return PureWindowsPath(env.app_data_dir, *RCLONE_CONF_PARTS)

    if not env.home_dir:
        raise ConfigPathError("HOME environment variable not set")
    return PurePosixPath(env.home_dir, ".config", *RCLONE_CONF_PARTS)
