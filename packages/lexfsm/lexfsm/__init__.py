"""lexfsm - A small deterministic finite-state machine engine for lexers."""

import logging

from lexfsm.machine import Machine
from lexfsm.predicates import Equals, NoneOf, OneOf
from lexfsm.result import Failure, RunResult, Success
from lexfsm.state import State
from lexfsm.transition import Transition
from lexfsm.types import InvalidTargetError, StateId, UnmatchedSymbolError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Machine",
    "State",
    "Transition",
    "Success",
    "Failure",
    "RunResult",
    "StateId",
    "Equals",
    "OneOf",
    "NoneOf",
    "UnmatchedSymbolError",
    "InvalidTargetError",
]
