"""Lexer."""

from hserrpy.lexer.lexer import Lexer, dump_tokens, token_text
from hserrpy.lexer.tokens import (
    CLASSIFIED_TOKEN_KINDS,
    EOF_TOKEN,
    Token,
    TokenFlags,
    TokenKind,
)
from hserrpy.lexer.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "CLASSIFIED_TOKEN_KINDS",
    "DEFAULT_VOCABULARY",
    "EOF_TOKEN",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "Vocabulary",
    "dump_tokens",
    "token_text",
]
