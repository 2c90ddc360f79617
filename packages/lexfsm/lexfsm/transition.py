"""Transition - a guarded edge to a target state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable

from lexfsm.predicates import Equals, OneOf
from lexfsm.types import Action, Predicate, StateId, T


@dataclass(frozen=True)
class Transition(Generic[T]):
    """Immutable transition rule.

    Attributes:
        target: Id of the state entered when the predicate accepts. Checked
            against the owning machine only when the transition is taken.
        predicate: Called with one symbol, returns whether this edge applies.
        action: Optional side effect called with the accepted symbol.
    """

    target: StateId
    predicate: Predicate[T]
    action: Action[T] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.target, bool) or not isinstance(self.target, int):
            raise TypeError(f"target must be an int, got {type(self.target).__name__}")
        if not callable(self.predicate):
            raise TypeError("predicate must be callable")
        if self.action is not None and not callable(self.action):
            raise TypeError("action must be callable or None")

    def accepts(self, symbol: T) -> bool:
        return bool(self.predicate(symbol))

    @classmethod
    def equals(
        cls, target: StateId, value: Any, action: Action[T] | None = None
    ) -> Transition[T]:
        """Transition taken on a symbol equal to *value*."""
        return cls(target, Equals(value), action)

    @classmethod
    def one_of(
        cls,
        target: StateId,
        values: Iterable[Any],
        action: Action[T] | None = None,
    ) -> Transition[T]:
        """Transition taken on any symbol in *values*."""
        return cls(target, OneOf(values), action)
