"""Run outcomes: a final state, or a structured failure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from lexfsm.types import StateId, UnmatchedSymbolError


@dataclass(frozen=True)
class Success:
    """The whole input was consumed."""

    final_state: StateId

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> StateId:
        return self.final_state


@dataclass(frozen=True)
class Failure:
    """No transition accepted ``symbol``; the run halted there.

    Attributes:
        final_state: State the machine stopped in.
        symbol: The rejected symbol.
        position: 1-based position of ``symbol`` in the input.
        failing_state: State whose transitions all rejected ``symbol``.
    """

    final_state: StateId
    symbol: Any
    position: int
    failing_state: StateId

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.to_error())

    def to_error(self) -> UnmatchedSymbolError:
        return UnmatchedSymbolError(self.symbol, self.position, self.failing_state)

    def unwrap(self) -> StateId:
        """Raise ``UnmatchedSymbolError`` describing this failure."""
        raise self.to_error()


RunResult = Union[Success, Failure]
