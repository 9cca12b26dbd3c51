"""History - undo and redo stacks of visited states."""
from __future__ import annotations

from undoable_fsm.types import StateName


class History:
    """Linear undo/redo stacks. The top of each stack is its last element."""

    def __init__(self) -> None:
        self._undo: list[StateName] = []
        self._redo: list[StateName] = []

    def record(self, state: StateName) -> None:
        """Push the state being left. Any pending redo entries are dropped."""
        self._undo.append(state)
        self._redo.clear()

    def step_back(self, current: StateName) -> StateName:
        """Pop the previous state, parking ``current`` on the redo stack.

        Raises IndexError (and changes nothing) when there is nothing to undo.
        """
        if not self._undo:
            raise IndexError("nothing to undo")
        self._redo.append(current)
        return self._undo.pop()

    def step_forward(self, current: StateName) -> StateName:
        """Pop the next redo state, parking ``current`` on the undo stack."""
        if not self._redo:
            raise IndexError("nothing to redo")
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_stack(self) -> tuple[StateName, ...]:
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[StateName, ...]:
        return tuple(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
