"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from hserrpy.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    WHITE_SPACE = 10

    # -------------------------
    # Generic content
    # -------------------------
    NUMBER = 20  # decimal, 0x hex, bare hex addresses
    WORD = 21
    STRING = 22  # quoted on a single line
    PUNCT = 23

    # -------------------------
    # Report-specific content
    # -------------------------
    KEYWORD = 30
    SIGNAL = 31
    URL = 32
    IDENTIFIER = 33
    REGISTER = 34  # RAX=0x..., x0=0x...

    # -------------------------
    # Structure markers
    # -------------------------
    SUBTITLE = 40
    SECTION_HDR = 41


CLASSIFIED_TOKEN_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.NUMBER,
        TokenKind.WORD,
        TokenKind.STRING,
        TokenKind.PUNCT,
        TokenKind.KEYWORD,
        TokenKind.SIGNAL,
        TokenKind.URL,
        TokenKind.IDENTIFIER,
        TokenKind.REGISTER,
    }
)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    LINE_START = 1 << 0
    UNTERMINATED_QUOTE = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified run of report text."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def is_at_line_start(self) -> bool:
        return bool(self.flags & TokenFlags.LINE_START)


EOF_TOKEN: Final[Token] = Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(0)))
