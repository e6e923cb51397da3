"""A reactive system of input cells, computed cells and change callbacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import count
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

_ids = count()


@dataclass(frozen=True)
class InputCellId:
    """Identifies an input cell."""

    id: int


@dataclass(frozen=True)
class ComputeCellId:
    """Identifies a compute cell."""

    id: int


@dataclass(frozen=True)
class CallbackId:
    """Identifies a callback registered on a compute cell."""

    id: int


CellId = Union[InputCellId, ComputeCellId]


class UnknownCellError(LookupError):
    """Raised when a cell does not belong to the reactor."""

    def __init__(self, cell: Any) -> None:
        super().__init__(f"unknown cell: {cell!r}")
        self.cell = cell


class NonexistentCellError(UnknownCellError):
    """Raised when removing a callback from a compute cell that does not exist."""


class NonexistentCallbackError(LookupError):
    """Raised when removing a callback that is not registered."""

    def __init__(self, callback_id: CallbackId) -> None:
        super().__init__(f"unknown callback: {callback_id!r}")
        self.callback_id = callback_id


@dataclass
class _ComputeCell(Generic[T]):
    value: T
    dependencies: tuple
    compute: Callable[[Sequence[T]], T]


class Reactor(Generic[T]):
    """Holds cells and keeps compute cells up to date as inputs change."""

    def __init__(self) -> None:
        self._inputs: dict[InputCellId, T] = {}
        self._computes: dict[ComputeCellId, _ComputeCell[T]] = {}
        self._dependents: dict[CellId, list[ComputeCellId]] = {}
        self._callbacks: dict[ComputeCellId, dict[CallbackId, Callable[[T], Any]]] = {}

    def _has(self, cell: CellId) -> bool:
        if isinstance(cell, InputCellId):
            return cell in self._inputs
        if isinstance(cell, ComputeCellId):
            return cell in self._computes
        return False

    def create_input(self, initial: T) -> InputCellId:
        """Create an input cell holding ``initial`` and return its id."""
        cell = InputCellId(next(_ids))
        self._inputs[cell] = initial
        return cell

    def create_compute(
        self,
        dependencies: Iterable[CellId],
        compute: Callable[[Sequence[T]], T],
    ) -> ComputeCellId:
        """Create a cell whose value is ``compute`` of its dependencies' values.

        Raises UnknownCellError naming the first dependency that does not exist.
        """
        deps = tuple(dependencies)
        for dep in deps:
            if not self._has(dep):
                raise UnknownCellError(dep)
        initial = compute([self.value(dep) for dep in deps])
        cell = ComputeCellId(next(_ids))
        self._computes[cell] = _ComputeCell(initial, deps, compute)
        for dep in deps:
            self._dependents.setdefault(dep, []).append(cell)
        return cell

    def value(self, cell: CellId) -> T:
        """Return the current value of ``cell``."""
        if isinstance(cell, InputCellId) and cell in self._inputs:
            return self._inputs[cell]
        if isinstance(cell, ComputeCellId) and cell in self._computes:
            return self._computes[cell].value
        raise UnknownCellError(cell)

    def set_value(self, cell: InputCellId, value: T) -> None:
        """Set an input cell and propagate the change, then fire callbacks."""
        if not isinstance(cell, InputCellId) or cell not in self._inputs:
            raise UnknownCellError(cell)
        self._inputs[cell] = value

        queue: deque[CellId] = deque([cell])
        to_fire: dict[tuple[ComputeCellId, CallbackId], T] = {}
        while queue:
            changed = queue.popleft()
            for compute_id in self._dependents.get(changed, ()):
                compute_cell = self._computes[compute_id]
                new_value = compute_cell.compute(
                    [self.value(dep) for dep in compute_cell.dependencies]
                )
                if new_value != compute_cell.value:
                    compute_cell.value = new_value
                    queue.append(compute_id)
                    for callback_id in self._callbacks.get(compute_id, {}):
                        to_fire[(compute_id, callback_id)] = new_value

        for (compute_id, callback_id), fired_value in to_fire.items():
            callback = self._callbacks.get(compute_id, {}).get(callback_id)
            if callback is not None:
                callback(fired_value)

    def add_callback(
        self, cell: ComputeCellId, callback: Callable[[T], Any]
    ) -> CallbackId:
        """Register ``callback`` to be called with the new value when ``cell`` changes."""
        if not isinstance(cell, ComputeCellId) or cell not in self._computes:
            raise UnknownCellError(cell)
        callback_id = CallbackId(next(_ids))
        self._callbacks.setdefault(cell, {})[callback_id] = callback
        return callback_id

    def remove_callback(self, cell: ComputeCellId, callback_id: CallbackId) -> None:
        """Unregister a callback from ``cell``."""
        if not isinstance(cell, ComputeCellId) or cell not in self._computes:
            raise NonexistentCellError(cell)
        callbacks = self._callbacks.get(cell, {})
        if callback_id not in callbacks:
            raise NonexistentCallbackError(callback_id)
        del callbacks[callback_id]