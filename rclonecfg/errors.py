"""Errors raised while translating, resolving and writing rclone configs.

Every error carries a ``stage`` so the caller can tell where a run stopped.
"""


class TranslateError(RuntimeError):
    """Base class for all rclonecfg failures."""

    stage = "translate"


class LoadError(TranslateError):
    """The source document could not be read."""

    stage = "load"


class NotFoundError(LoadError):
    """The source document does not exist."""


class ParseError(LoadError):
    """The source document is not a JSON object of flat objects."""


class ConfigPathError(TranslateError):
    """The environment variable the destination path is built from is unset."""

    stage = "resolve"


class WriteError(TranslateError):
    """Creating the destination directory or writing the file failed."""

    stage = "write"
