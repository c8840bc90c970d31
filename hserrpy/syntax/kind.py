"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from hserrpy.lexer import TokenKind


class HsErrSyntaxKind(IntEnum):
    """Report syntax vocabulary (tokens + nodes)."""

    TOMBSTONE = 0
    EOF = 1

    WHITE_SPACE = 10

    # Lexical tokens
    NUMBER = 20
    WORD = 21
    STRING = 22
    PUNCT = 23
    KEYWORD = 30
    SIGNAL = 31
    URL = 32
    IDENTIFIER = 33
    REGISTER = 34
    SUBTITLE = 40
    SECTION_HDR = 41

    # Node kinds
    DOCUMENT = 1000
    INTRO = 1001
    SECTION = 1002
    SUBSECTION = 1003
    CONTENT = 1004
    TRAILER = 1005

    @property
    def is_token(self) -> bool:
        return self != HsErrSyntaxKind.TOMBSTONE and self.value < HsErrSyntaxKind.DOCUMENT.value

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "HsErrSyntaxKind":
        match kind:
            case TokenKind.EOF:
                return HsErrSyntaxKind.EOF
            case TokenKind.WHITE_SPACE:
                return HsErrSyntaxKind.WHITE_SPACE
            case TokenKind.NUMBER:
                return HsErrSyntaxKind.NUMBER
            case TokenKind.WORD:
                return HsErrSyntaxKind.WORD
            case TokenKind.STRING:
                return HsErrSyntaxKind.STRING
            case TokenKind.PUNCT:
                return HsErrSyntaxKind.PUNCT
            case TokenKind.KEYWORD:
                return HsErrSyntaxKind.KEYWORD
            case TokenKind.SIGNAL:
                return HsErrSyntaxKind.SIGNAL
            case TokenKind.URL:
                return HsErrSyntaxKind.URL
            case TokenKind.IDENTIFIER:
                return HsErrSyntaxKind.IDENTIFIER
            case TokenKind.REGISTER:
                return HsErrSyntaxKind.REGISTER
            case TokenKind.SUBTITLE:
                return HsErrSyntaxKind.SUBTITLE
            case TokenKind.SECTION_HDR:
                return HsErrSyntaxKind.SECTION_HDR
            case _:
                raise ValueError(f"Unsupported TokenKind mapping: {kind!r}")

    def to_token_kind(self) -> TokenKind:
        if not self.is_token:
            raise ValueError(f"Not a token kind: {self!r}")
        return TokenKind(self.value)
