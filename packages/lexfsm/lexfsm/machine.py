"""Machine - state storage and the run loop."""

from __future__ import annotations

import logging
from typing import Generic, Iterable

from lexfsm.result import Failure, RunResult, Success
from lexfsm.state import State
from lexfsm.types import InvalidTargetError, StateId, T

logger = logging.getLogger(__name__)


class Machine(Generic[T]):
    """Deterministic finite-state machine over symbols of type ``T``.

    States are created with :meth:`add_state` and addressed by index.
    State 0 is the start state. The graph is append-only; once built it
    may be run any number of times, including from several threads,
    since :meth:`run` only reads it.
    """

    def __init__(self) -> None:
        self._states: list[State[T]] = []

    def add_state(self, accepting: bool = False) -> StateId:
        state_id = len(self._states)
        self._states.append(State(state_id, accepting=accepting))
        return state_id

    def __getitem__(self, state_id: StateId) -> State[T]:
        if not 0 <= state_id < len(self._states):
            raise IndexError(
                f"State {state_id} does not exist (machine has {len(self._states)} states)"
            )
        return self._states[state_id]

    def __len__(self) -> int:
        return len(self._states)

    @property
    def states(self) -> tuple[State[T], ...]:
        return tuple(self._states)

    def run(self, symbols: Iterable[T], call_actions: bool = True) -> RunResult:
        """Drive *symbols* through the machine starting at state 0.

        Returns ``Success`` with the state reached when the input is
        exhausted, or ``Failure`` at the first symbol no transition of the
        current state accepts. With ``call_actions=False`` the same path
        is followed but transition actions are not called.

        Raises:
            InvalidTargetError: A taken transition targets a missing state.
            IndexError: The machine has no states and the input is non-empty.
        """
        states = self._states
        count = len(states)
        debug = logger.isEnabledFor(logging.DEBUG)
        current = 0
        position = 1

        for symbol in symbols:
            if count == 0:
                raise IndexError("Cannot run a machine with no states")

            found = states[current].match(symbol)
            if found is None:
                if debug:
                    logger.debug(
                        "state %d rejected %r at position %d", current, symbol, position
                    )
                return Failure(current, symbol, position, current)

            index, transition = found
            if call_actions and transition.action is not None:
                transition.action(symbol)

            target = transition.target
            if not 0 <= target < count:
                logger.error(
                    "transition %d of state %d targets unknown state %d",
                    index, current, target,
                )
                raise InvalidTargetError(current, index, target, position, count)
            if debug:
                logger.debug(
                    "%d -> %d on %r at position %d", current, target, symbol, position
                )
            current = target
            position += 1

        return Success(current)

    def accepts(self, symbols: Iterable[T]) -> bool:
        """Whether *symbols* run to completion in a state marked accepting.

        Actions are not called.
        """
        result = self.run(symbols, call_actions=False)
        return result.ok and self._states[result.final_state].accepting
