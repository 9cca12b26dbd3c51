"""FiniteStateMachine - transition table, current state and undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from undoable_fsm.config import FSMConfig, StateDef
from undoable_fsm.history import History
from undoable_fsm.types import (
    ConfigError,
    EventName,
    InvalidStateError,
    InvalidTransitionError,
    StateName,
)

logger = logging.getLogger(__name__)

# Either a parsed config or its plain-mapping form.
ConfigArg = FSMConfig | Mapping[str, Any]


class FiniteStateMachine:
    """Tracks a single current state over a declarative transition table.

    Forward transitions (``change_state`` and ``trigger``) record the state
    being left so it can be restored with ``undo``; ``redo`` is available only
    until the next forward transition. ``reset`` jumps back to the initial
    state without touching history.

    The table is not validated: an ``initial`` missing from ``states`` or a
    transition target naming no state is accepted and only fails once the
    machine sits in that state and ``trigger`` is called.

    Instances are not thread-safe.
    """

    def __init__(self, config: ConfigArg | None = None) -> None:
        if config is None:
            raise ConfigError("FiniteStateMachine requires a config")
        if not isinstance(config, FSMConfig):
            config = FSMConfig.from_dict(config)
        self._initial: StateName = config.initial
        self._current: StateName = config.initial
        self._states: Mapping[StateName, StateDef] = config.states
        self._history = History()

    @property
    def initial(self) -> StateName:
        return self._initial

    @property
    def state(self) -> StateName:
        return self._current

    @property
    def states(self) -> Mapping[StateName, StateDef]:
        return self._states

    def get_state(self) -> StateName:
        """Return the active state."""
        return self._current

    def change_state(self, state: StateName) -> None:
        """Go to ``state`` regardless of the transition table.

        Raises InvalidStateError if ``state`` is not in the table.
        """
        if state not in self._states:
            raise InvalidStateError(state, f"Unknown state {state!r}")
        self._move(state)

    def trigger(self, event: EventName) -> None:
        """Follow the current state's transition for ``event``.

        Raises InvalidTransitionError if the current state defines no
        transition for ``event`` (or has no readable transition table), or
        InvalidStateError if the current state itself is missing from the
        table.
        """
        if self._current not in self._states:
            raise InvalidStateError(
                self._current,
                f"Current state {self._current!r} is not in the transition table",
            )
        transitions = _transitions_of(self._states[self._current])
        if transitions is None or event not in transitions:
            raise InvalidTransitionError(
                self._current,
                event,
                f"No transition for event {event!r} from state {self._current!r}",
            )
        self._move(transitions[event])

    def reset(self) -> None:
        """Return to the initial state. History is left as is."""
        logger.debug("reset %r -> %r", self._current, self._initial)
        self._current = self._initial

    def get_states(self, event: EventName | None = None) -> list[StateName]:
        """Return state names in table order.

        With no ``event``, every state is returned. Otherwise only states
        whose transitions map ``event`` to a non-empty target are returned;
        an empty ``event`` matches nothing. States without a readable
        transition table are skipped.
        """
        if event is None:
            return list(self._states)
        if not event:
            return []
        names: list[StateName] = []
        for name, state_def in self._states.items():
            transitions = _transitions_of(state_def)
            if transitions is not None and transitions.get(event):
                names.append(name)
        return names

    def undo(self) -> bool:
        """Go back to the previous state. Returns False if nothing to undo."""
        if not self._history.can_undo:
            return False
        previous = self._history.step_back(self._current)
        logger.debug("undo %r -> %r", self._current, previous)
        self._current = previous
        return True

    def redo(self) -> bool:
        """Re-apply the last undone change. Returns False if nothing to redo."""
        if not self._history.can_redo:
            return False
        following = self._history.step_forward(self._current)
        logger.debug("redo %r -> %r", self._current, following)
        self._current = following
        return True

    def clear_history(self) -> None:
        """Forget all undo and redo entries."""
        self._history.clear()
        logger.debug("history cleared at %r", self._current)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def undo_history(self) -> tuple[StateName, ...]:
        """Undo entries, oldest first."""
        return self._history.undo_stack

    @property
    def redo_history(self) -> tuple[StateName, ...]:
        """Redo entries, the next one to be redone last."""
        return self._history.redo_stack

    def _move(self, target: StateName) -> None:
        self._history.record(self._current)
        logger.debug("transition %r -> %r", self._current, target)
        self._current = target

    def __repr__(self) -> str:
        return (
            f"FiniteStateMachine(state={self._current!r}, "
            f"undo={self._history.undo_depth}, redo={self._history.redo_depth})"
        )


def _transitions_of(state_def: Any) -> Mapping[EventName, StateName] | None:
    transitions = getattr(state_def, "transitions", None)
    return transitions if isinstance(transitions, Mapping) else None
