"""Arithmetic lexer -- lexfsm + lexfsm-tokens end to end.

Tokenizes expressions such as ``rate * (x1 + 2.5)`` into NUMBER, NAME, OP,
LPAREN, RPAREN and SPACE tokens, then trims and drops whitespace.

Run:
    python main.py "rate * (x1 + 2.5)"
    python main.py --validate-only "1 + + 2"
    python main.py --verbose "a+1"
"""
from __future__ import annotations

import argparse
import logging
import string
import sys
from enum import Enum, auto

from lexfsm import Failure, Machine
from lexfsm_tokens import TokenCollection

logger = logging.getLogger("arith_lexer")


class Kind(Enum):
    NUMBER = auto()
    NAME = auto()
    OP = auto()
    LPAREN = auto()
    RPAREN = auto()
    SPACE = auto()


DIGITS = string.digits
NAME_START = string.ascii_letters + "_"
NAME_CHARS = NAME_START + DIGITS
OPERATORS = "+-*/^%"
WHITESPACE = " \t\r\n"


def build_lexer(tokens: TokenCollection) -> Machine[str]:
    """Build the lexer graph. Emitted tokens are appended to *tokens*.

    States: 0 start/between tokens, 1 integer, 2 after '.', 3 fraction,
    4 name, 5 whitespace run. All but 2 are accepting.
    """
    machine: Machine[str] = Machine()
    start = machine.add_state(accepting=True)
    integer = machine.add_state(accepting=True)
    dot = machine.add_state()
    fraction = machine.add_state(accepting=True)
    name = machine.add_state(accepting=True)
    space = machine.add_state(accepting=True)

    machine[integer].on_any(integer, DIGITS, tokens.extend()).on(dot, ".", tokens.extend())
    machine[dot].on_any(fraction, DIGITS, tokens.extend())
    machine[fraction].on_any(fraction, DIGITS, tokens.extend())
    machine[name].on_any(name, NAME_CHARS, tokens.extend())
    machine[space].on_any(space, WHITESPACE, tokens.extend())

    # Every state except ``dot`` may end its token and begin a new one.
    for state_id in (start, integer, fraction, name, space):
        (
            machine[state_id]
            .on_any(integer, DIGITS, tokens.emit(Kind.NUMBER))
            .on_any(name, NAME_START, tokens.emit(Kind.NAME))
            .on_any(space, WHITESPACE, tokens.emit(Kind.SPACE))
            .on_any(start, OPERATORS, tokens.emit(Kind.OP))
            .on(start, "(", tokens.emit(Kind.LPAREN))
            .on(start, ")", tokens.emit(Kind.RPAREN))
        )
    return machine


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arithmetic lexer -- lexfsm demo")
    p.add_argument("expression", help="Expression to tokenize")
    p.add_argument("--validate-only", action="store_true",
                   help="Check the expression without emitting tokens")
    p.add_argument("--verbose", action="store_true", help="Log every transition")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    tokens = TokenCollection()
    machine = build_lexer(tokens)
    result = machine.run(args.expression, call_actions=not args.validate_only)

    if isinstance(result, Failure):
        print(f"error: {result.message}", file=sys.stderr)
        print(f"  {args.expression}", file=sys.stderr)
        print(f"  {' ' * (result.position - 1)}^", file=sys.stderr)
        return 1
    if not machine[result.final_state].accepting:
        print(f"error: unexpected end of input in state {result.final_state}",
              file=sys.stderr)
        return 1

    if args.validate_only:
        print("ok")
        return 0

    tokens.trim(Kind.SPACE)
    tokens.remove_type(Kind.SPACE)
    logger.info("lexed %d tokens", len(tokens))
    print(tokens, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
