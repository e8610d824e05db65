from __future__ import annotations


class TransportError(Exception):
    """Base class for every error raised by the stop network."""


class NoNameError(TransportError, ValueError):
    def __init__(self, name=None):
        super().__init__(f"stop name must be a non-empty string, got {name!r}")


class DuplicateNodeError(TransportError):
    def __init__(self, name: str):
        super().__init__(f"stop {name!r} is already part of the network")
        self.name = name


# the network only ever holds stops
DuplicateStopError = DuplicateNodeError


class InvariantViolation(TransportError):
    pass
