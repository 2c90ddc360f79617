"""Inspectable predicate kinds for transitions.

Each kind is a plain callable, so the engine evaluates it exactly like a
user-supplied function.
"""

from __future__ import annotations

from typing import Any, Iterable


def _hash_or_type(kind: type, value: Any) -> int:
    # Unhashable members fall back to a per-kind hash; equality still decides.
    try:
        return hash((kind, value))
    except TypeError:
        return hash(kind)


class Equals:
    """Accept a symbol equal to ``value``."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self, symbol: Any) -> bool:
        return symbol == self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equals):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return _hash_or_type(Equals, self.value)

    def __repr__(self) -> str:
        return f"Equals({self.value!r})"


class OneOf:
    """Accept a symbol equal to any member of ``values``.

    Membership is tested with ``==`` so symbols need not be hashable.
    A string is treated as a collection of characters. An empty
    collection never matches.
    """

    __slots__ = ("values",)

    def __init__(self, values: Iterable[Any]) -> None:
        self.values = tuple(values)

    def __call__(self, symbol: Any) -> bool:
        return symbol in self.values

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.values == other.values  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return _hash_or_type(type(self), self.values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.values)!r})"


class NoneOf(OneOf):
    """Accept any symbol that is not a member of ``values``."""

    __slots__ = ()

    def __call__(self, symbol: Any) -> bool:
        return symbol not in self.values
