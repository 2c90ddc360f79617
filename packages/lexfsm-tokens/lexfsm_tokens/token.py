"""Token value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Token:
    """A typed lexeme.

    Attributes:
        type: Token kind, usually an ``Enum`` member.
        lexeme: Literal source text. Mutable so lexer actions can grow it.
    """

    type: Any
    lexeme: str = ""


def type_name(token_type: Any) -> str:
    """Display name of a token type: ``Enum`` member name, else ``str()``."""
    name = getattr(token_type, "name", None)
    return name if isinstance(name, str) else str(token_type)
