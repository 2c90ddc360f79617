"""Shared type aliases and exceptions for the lexfsm engine."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

StateId = int

Predicate = Callable[[T], bool]
Action = Callable[[T], None]


def _describe(symbol: Any) -> str:
    return f'{type(symbol).__name__} "{symbol}"'


class UnmatchedSymbolError(Exception):
    """Raised on demand for a failed run (see ``Failure.unwrap``)."""

    def __init__(self, symbol: Any, position: int, state: StateId) -> None:
        self.symbol = symbol
        self.position = position
        self.state = state
        super().__init__(
            f"Unexpected {_describe(symbol)} at state {state}, position {position}."
        )


class InvalidTargetError(IndexError):
    """Raised when a taken transition points at a state that does not exist."""

    def __init__(
        self,
        state: StateId,
        index: int,
        target: StateId,
        position: int,
        state_count: int,
    ) -> None:
        self.state = state
        self.index = index
        self.target = target
        self.position = position
        self.state_count = state_count
        super().__init__(
            f"Transition {index} of state {state} targets unknown state {target} "
            f"(machine has {state_count} states) at position {position}"
        )
