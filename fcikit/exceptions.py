"""Exceptions raised while talking to or controlling the robot."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class RobotException(Exception):
    """Base class of every error reported by this package."""


class ModelException(RobotException):
    """Raised if the robot model cannot be loaded or used."""


class NetworkException(RobotException):
    """Raised if a connection error occurs."""


class ProtocolException(RobotException):
    """Raised if the robot returns an unexpected or malformed response."""


class IncompatibleVersionException(RobotException):
    """Raised if the server and library protocol versions do not match."""

    def __init__(self, server_version: int, library_version: int) -> None:
        super().__init__(
            f"Incompatible library version (server version: {server_version}, "
            f"library version: {library_version}). Please update the robot system "
            f"or choose a library version that uses the server version {server_version}."
        )
        self.server_version = server_version
        self.library_version = library_version


class ControlException(RobotException):
    """Raised if a control loop fails; carries the records logged before the failure."""

    def __init__(self, message: str, log: Iterable[Any] | None = None) -> None:
        super().__init__(message)
        self.log = list(log) if log is not None else []


class CommandException(RobotException):
    """Raised if a command is rejected or fails."""


class RealtimeException(RobotException):
    """Raised if realtime priority cannot be obtained."""


class InvalidOperationException(RobotException):
    """Raised if an operation is not allowed in the current state."""