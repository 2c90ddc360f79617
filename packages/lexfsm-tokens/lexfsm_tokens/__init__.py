"""lexfsm-tokens - Token model and token-sequence helpers for lexfsm lexers."""

from lexfsm_tokens.collection import TokenCollection
from lexfsm_tokens.token import Token, type_name

__all__ = ["Token", "TokenCollection", "type_name"]
