"""undoable-fsm - Finite state machine with undo/redo history."""
from __future__ import annotations

from undoable_fsm.config import FSMConfig, StateDef
from undoable_fsm.history import History
from undoable_fsm.machine import FiniteStateMachine
from undoable_fsm.types import (
    ConfigError,
    EventName,
    FSMError,
    InvalidStateError,
    InvalidTransitionError,
    StateName,
)

__all__ = [
    "FiniteStateMachine",
    "FSMConfig",
    "StateDef",
    "History",
    "StateName",
    "EventName",
    "FSMError",
    "ConfigError",
    "InvalidStateError",
    "InvalidTransitionError",
]
