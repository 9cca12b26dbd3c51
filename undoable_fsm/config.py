"""State table configuration dataclasses."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from undoable_fsm.types import ConfigError, EventName, StateName


@dataclass(frozen=True)
class StateDef:
    """Immutable definition of a single state.

    Attributes:
        transitions: Maps event names to the state each event leads to.
            Targets are not checked against the table. A value that is not
            a mapping is kept as given; the state then has no usable
            transitions.
    """

    transitions: Mapping[EventName, StateName] = field(default_factory=dict)


@dataclass(frozen=True)
class FSMConfig:
    """Immutable configuration for a FiniteStateMachine.

    Attributes:
        initial: State the machine starts in and returns to on reset.
        states: Maps state names to their definitions. Iteration order is
            the order reported by ``get_states``.
    """

    initial: StateName
    states: Mapping[StateName, StateDef]

    def state_names(self) -> list[StateName]:
        """Return all state names in table order."""
        return list(self.states)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FSMConfig:
        """Build a config from ``{"initial": ..., "states": {...}}``.

        State values may be ``StateDef`` instances or mappings with an
        optional ``"transitions"`` mapping. Each transitions mapping is kept
        by reference. Entries are not checked: a missing ``"initial"`` gives
        ``None`` and a malformed state only fails once the machine is in it.

        Raises ConfigError only when ``data`` or its ``"states"`` is not a
        mapping at all.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"config must be a mapping, got {type(data).__name__}"
            )
        raw_states = data.get("states", {})
        if not isinstance(raw_states, Mapping):
            raise ConfigError(
                f"'states' must be a mapping, got {type(raw_states).__name__}"
            )

        states: dict[StateName, StateDef] = {}
        for name, raw in raw_states.items():
            states[name] = _parse_state(raw)
        return cls(initial=data.get("initial"), states=states)


def _parse_state(raw: Any) -> StateDef:
    if isinstance(raw, StateDef):
        return raw
    if not isinstance(raw, Mapping):
        # No transitions can be read from it.
        return StateDef(transitions=raw)
    return StateDef(transitions=raw.get("transitions", {}))
