"""Shared type aliases and errors for the state machine."""

from __future__ import annotations

StateName = str
EventName = str


class FSMError(Exception):
    """Base class for state machine errors."""


class ConfigError(FSMError, ValueError):
    """Raised when a machine is built without a usable configuration."""


class InvalidStateError(FSMError, KeyError):
    """Raised when a state is not present in the transition table."""

    def __init__(self, state: StateName, message: str) -> None:
        self.state = state
        super().__init__(message)


class InvalidTransitionError(FSMError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, state: StateName, event: EventName, message: str) -> None:
        self.state = state
        self.event = event
        super().__init__(message)
