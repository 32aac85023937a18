"""Exception types raised by the core and translated to exit codes by the CLI."""

from __future__ import annotations


class GrubUtilsError(Exception):
    """Base class for errors that end the run with exit code 1."""


class ConfigError(GrubUtilsError):
    """Raised when the settings file is invalid or missing."""


class LaunchError(GrubUtilsError):
    """Raised when an external program could not be started at all.

    A program that starts and exits nonzero is not a LaunchError.
    """

    def __init__(self, command: str, reason: str):
        super().__init__(reason)
        self.command = command
        self.reason = reason
