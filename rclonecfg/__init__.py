"""
rclonecfg - Translate a JSON remote list into rclone's rclone.conf.

Reads one entry per named remote from a JSON document and writes the INI
file rclone expects, in the per-user location rclone looks in on Windows,
macOS and Linux. Can also copy the live rclone.conf back out.
"""

__version__ = "1.0.0"
__author__ = "rclonecfg"

APPNAME = "rclonecfg"
DEFAULT_SOURCE = "config.json"  # Read from the working directory
DEFAULT_EXPORT = "rclone.conf"
