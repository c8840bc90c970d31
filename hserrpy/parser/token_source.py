"""Single-pass token cursor between the lexer and the parser."""

from hserrpy.diagnostics import Diagnostic
from hserrpy.lexer import Lexer, Token, TokenKind
from hserrpy.text import TextRange, TextSize


class TokenSource:
    """Pulls tokens from the lexer one at a time; whitespace is not hidden."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token = lexer.next_token()
        self._consumed = 0

    @property
    def current(self) -> TokenKind:
        return self._current.kind

    @property
    def current_range(self) -> TextRange:
        return self._current.range

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def position(self) -> TextSize:
        return self._current.range.start

    @property
    def consumed(self) -> int:
        """Number of tokens bumped so far."""
        return self._consumed

    def bump(self) -> None:
        if self._current.kind == TokenKind.EOF:
            return
        self._current = self._lexer.next_token()
        self._consumed += 1

    def finish(self) -> list[Diagnostic]:
        return self._lexer.diagnostics
