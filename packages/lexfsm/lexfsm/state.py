"""State - an ordered, append-only list of transitions."""

from __future__ import annotations

from typing import Any, Generic, Iterable

from lexfsm.transition import Transition
from lexfsm.types import Action, Predicate, StateId, T


class State(Generic[T]):
    """A node of the machine graph, identified by its index.

    Transitions are evaluated in insertion order and the first one that
    accepts a symbol wins. Every builder method returns the state itself
    so rules can be chained::

        machine[s].on(1, "a").on_any(2, "0123456789").when(0, str.isspace)

    ``accepting`` is caller metadata. ``Machine.run`` never reads it.
    """

    def __init__(self, state_id: StateId, accepting: bool = False) -> None:
        self._id = state_id
        self._transitions: list[Transition[T]] = []
        self.accepting = accepting

    @property
    def id(self) -> StateId:
        return self._id

    @property
    def transitions(self) -> tuple[Transition[T], ...]:
        return tuple(self._transitions)

    def __len__(self) -> int:
        return len(self._transitions)

    def __repr__(self) -> str:
        return (
            f"State(id={self._id}, transitions={len(self._transitions)}, "
            f"accepting={self.accepting})"
        )

    def add(self, transition: Transition[T]) -> State[T]:
        """Append an explicit transition."""
        if not isinstance(transition, Transition):
            raise TypeError(
                f"expected Transition, got {type(transition).__name__}"
            )
        self._transitions.append(transition)
        return self

    def when(
        self,
        target: StateId,
        predicate: Predicate[T],
        action: Action[T] | None = None,
    ) -> State[T]:
        """Append a transition guarded by an arbitrary predicate."""
        return self.add(Transition(target, predicate, action))

    def on(
        self,
        target: StateId,
        value: Any,
        action: Action[T] | None = None,
    ) -> State[T]:
        """Append a transition taken on a symbol equal to *value*."""
        return self.add(Transition.equals(target, value, action))

    def on_any(
        self,
        target: StateId,
        values: Iterable[Any],
        action: Action[T] | None = None,
    ) -> State[T]:
        """Append a transition taken on any symbol in *values*."""
        return self.add(Transition.one_of(target, values, action))

    def match(self, symbol: T) -> tuple[int, Transition[T]] | None:
        """Return ``(index, transition)`` of the first acceptor, or None."""
        for index, transition in enumerate(self._transitions):
            if transition.accepts(symbol):
                return index, transition
        return None
