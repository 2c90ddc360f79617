"""TokenCollection - an ordered token list with lexing and parsing helpers."""

from __future__ import annotations

from typing import Any, Callable

from lexfsm_tokens.token import Token, type_name


class TokenCollection(list):
    """List of :class:`Token` with type-based search, split and trim.

    Mutating helpers work in place; ``segment`` and ``split`` return new
    collections.
    """

    @property
    def last(self) -> Token:
        """The most recently added token. Raises IndexError if empty."""
        if not self:
            raise IndexError("TokenCollection is empty")
        return self[-1]

    def add(self, token_type: Any, lexeme: str = "") -> Token:
        """Append a new token and return it."""
        token = Token(token_type, str(lexeme))
        self.append(token)
        return token

    def remove_type(self, token_type: Any) -> None:
        """Drop every token of *token_type*."""
        self[:] = [t for t in self if t.type != token_type]

    def find_type(self, token_type: Any, start: int = 0, count: int | None = None) -> int:
        """Index of the first *token_type* token in ``[start, start + count)``.

        The window is clamped to the collection. Returns -1 if none found.
        """
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        stop = len(self) if count is None else min(len(self), start + max(0, count))
        for i in range(start, stop):
            if self[i].type == token_type:
                return i
        return -1

    def collapse_type(self, token_type: Any) -> None:
        """Collapse each run of consecutive *token_type* tokens into its first.

        Lexemes of the dropped tokens are discarded.
        """
        kept: list[Token] = []
        for token in self:
            if kept and token.type == token_type and kept[-1].type == token_type:
                continue
            kept.append(token)
        self[:] = kept

    def segment(self, start: int, last: int) -> TokenCollection:
        """Copy of tokens ``start..last`` (both inclusive), clamped to bounds."""
        return TokenCollection(self[max(0, start) : max(0, last + 1)])

    def split(self, token_type: Any, include_empty: bool = True) -> list[TokenCollection]:
        """Split on *token_type* delimiters, which are dropped."""
        groups: list[TokenCollection] = []
        current = TokenCollection()
        for token in self:
            if token.type == token_type:
                if current or include_empty:
                    groups.append(current)
                current = TokenCollection()
            else:
                current.append(token)
        if current or include_empty:
            groups.append(current)
        return groups

    def starts_with(self, token_type: Any) -> bool:
        return bool(self) and self[0].type == token_type

    def ends_with(self, token_type: Any) -> bool:
        return bool(self) and self[-1].type == token_type

    def trim_start(self, token_type: Any) -> None:
        i = 0
        while i < len(self) and self[i].type == token_type:
            i += 1
        del self[:i]

    def trim_end(self, token_type: Any) -> None:
        i = len(self)
        while i > 0 and self[i - 1].type == token_type:
            i -= 1
        del self[i:]

    def trim(self, token_type: Any) -> None:
        self.trim_start(token_type)
        self.trim_end(token_type)

    # Action factories for lexer transitions.

    def emit(self, token_type: Any) -> Callable[[str], None]:
        """Return an action that starts a new *token_type* token with the symbol."""

        def _emit(symbol: str) -> None:
            self.add(token_type, symbol)

        return _emit

    def extend(self) -> Callable[[str], None]:
        """Return an action that appends the symbol to the last token's lexeme."""

        def _extend(symbol: str) -> None:
            self.last.lexeme += str(symbol)

        return _extend

    def __str__(self) -> str:
        return "".join(f"{type_name(t.type)} | {t.lexeme}\n" for t in self)

    def __repr__(self) -> str:
        return f"TokenCollection({list.__repr__(self)})"
