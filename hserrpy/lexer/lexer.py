"""Lexer."""

import re

from hserrpy.diagnostics import Diagnostic
from hserrpy.diagnostics.codes import LEXER_UNTERMINATED_STRING
from hserrpy.lexer.tokens import Token, TokenFlags, TokenKind
from hserrpy.lexer.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from hserrpy.text import TextRange, TextSize, slice_text_range

_LINE_END = r"(?=[ \t]*(?:[\r\n]|\Z))"
_BANNER_LINE = re.compile(r"-{3}[^\r\n]*")
_BANNER_MIN_LENGTH = 6
_END_MARKER = re.compile(r"END\." + _LINE_END)

_HEX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+")
_BARE_HEX = re.compile(r"[0-9][0-9a-fA-F]{7,}(?![\w$])")
_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]+)*")
_WORD_TAIL = re.compile(r"[\w$]*")

_URL = re.compile(r"(?:https?|ftp|file|jar)://[^\s\"'<>()\[\]{}]+")
_URL_TRAILING = ".,;:!?"
_NAME = re.compile(r"(?:[^\W\d]|\$)[\w$]*(?:(?:\.|::)(?:[^\W\d]|[$<])[\w$<>]*)*")
_NAME_SEGMENT_SEPARATOR = re.compile(r"\.|::")
_THROWABLE = re.compile(r"[A-Z]\w*(?:Exception|Error)")

_QUOTES = "\"'"


class Lexer:
    """Lossless, total classifier over hs_err report text.

    Every character of the source ends up in exactly one token; whitespace is
    a regular token rather than trivia.
    """

    def __init__(self, source: str, *, vocabulary: Vocabulary | None = None) -> None:
        self._source = source
        self._vocabulary = vocabulary if vocabulary is not None else DEFAULT_VOCABULARY
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics emitted so far."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        if self._at_line_start():
            self._current_flags |= TokenFlags.LINE_START

        kind = self._lex_token()
        if self._position <= self._current_start.value:
            raise RuntimeError(f"Lexer did not advance at offset {self._current_start.value}")

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        """Lex the whole source. The returned list ends with a single EOF token."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch.isspace():
            return self._consume_whitespace()

        if self._current_flags & TokenFlags.LINE_START:
            kind = self._lex_line_start_marker()
            if kind is not None:
                return kind

        if ch in _QUOTES:
            return self._lex_string(ch)

        if "0" <= ch <= "9":
            return self._lex_number()

        if ch.isalpha() or ch == "_" or ch == "$":
            return self._lex_word()

        return self._lex_punct()

    def _lex_line_start_marker(self) -> TokenKind | None:
        if self._eat_banner() or self._eat_pattern(_END_MARKER):
            return TokenKind.SECTION_HDR

        section = self._vocabulary.match_section_title(self._source, self._position)
        subsection = self._vocabulary.match_subsection_title(self._source, self._position)
        if section and section >= subsection:
            self._advance(section)
            return TokenKind.SECTION_HDR
        if subsection:
            self._advance(subsection)
            return TokenKind.SUBTITLE
        return None

    def _lex_string(self, quote: str) -> TokenKind:
        if quote == "'" and self._position > 0 and self._source[self._position - 1].isalnum():
            # Apostrophe inside a word, e.g. `can't`.
            self._advance(1)
            return TokenKind.PUNCT

        end = self._position + 1
        while end < len(self._source):
            ch = self._source[end]
            if ch == quote:
                self._advance(end + 1 - self._position)
                return TokenKind.STRING
            if ch == "\n" or ch == "\r":
                break
            end += 1

        self._advance(1)
        self._current_flags |= TokenFlags.UNTERMINATED_QUOTE
        self._diagnostics.append(LEXER_UNTERMINATED_STRING.at(self.current_range))
        return TokenKind.PUNCT

    def _lex_number(self) -> TokenKind:
        if self._eat_pattern(_HEX_LITERAL) or self._eat_pattern(_BARE_HEX):
            return TokenKind.NUMBER

        self._eat_pattern(_DECIMAL)
        ch = self._current_char()
        if ch.isalpha() or ch == "_" or ch == "$":
            # Sizes and versions such as `1024k` or `64bit`.
            self._eat_pattern(_WORD_TAIL)
            return TokenKind.WORD
        return TokenKind.NUMBER

    def _lex_word(self) -> TokenKind:
        url = _URL.match(self._source, self._position)
        if url is not None:
            text = url.group().rstrip(_URL_TRAILING)
            self._advance(len(text))
            return TokenKind.URL

        register = self._vocabulary.match_register(self._source, self._position)
        if register:
            self._advance(register)
            return TokenKind.REGISTER

        name = _NAME.match(self._source, self._position)
        if name is None:
            self._advance(1)
            return TokenKind.WORD
        self._advance(name.end() - self._position)
        return self._classify_name(name.group())

    def _classify_name(self, text: str) -> TokenKind:
        if self._vocabulary.is_signal(text):
            return TokenKind.SIGNAL
        last_segment = _NAME_SEGMENT_SEPARATOR.split(text)[-1]
        if _THROWABLE.fullmatch(last_segment):
            return TokenKind.SIGNAL
        if self._vocabulary.is_keyword(text):
            return TokenKind.KEYWORD
        if not text.isalpha():
            return TokenKind.IDENTIFIER
        return TokenKind.WORD

    def _lex_punct(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isspace() or ch.isalpha() or ch in _QUOTES or ch == "_" or ch == "$" or "0" <= ch <= "9":
                break
            self._advance(1)
        return TokenKind.PUNCT

    def _consume_whitespace(self) -> TokenKind:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)
        return TokenKind.WHITE_SPACE

    def _at_line_start(self) -> bool:
        if self._position == 0:
            return True
        return self._source[self._position - 1] in "\r\n"

    def _eat_banner(self) -> bool:
        """`---- TITLE ----` up to the end of the line, trailing blanks excluded."""
        match = _BANNER_LINE.match(self._source, self._position)
        if match is None:
            return False
        banner = match.group().rstrip(" \t")
        if len(banner) < _BANNER_MIN_LENGTH or not banner.endswith("---"):
            return False
        self._advance(len(banner))
        return True

    def _eat_pattern(self, pattern: re.Pattern[str]) -> bool:
        match = pattern.match(self._source, self._position)
        if match is None or match.end() == self._position:
            return False
        self._advance(match.end() - self._position)
        return True

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
