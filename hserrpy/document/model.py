"""Document tree model for hs_err reports."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from hserrpy.document.names import INTRO_LABEL, derive_name, section_label
from hserrpy.lexer import TokenKind
from hserrpy.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Presentation:
    """Display descriptor for outline-style consumers."""

    label: str | None
    location: str | None = None


def line_location(line_index: LineIndex | None, range: TextRange) -> str | None:
    if line_index is None:
        return None
    return f"line {line_index.line_of(range.start)}"


def _join(tokens: tuple[DocToken, ...]) -> str:
    return "".join(token.text for token in tokens)


@dataclass(frozen=True, slots=True)
class DocToken:
    """Classified leaf with its exact source text."""

    kind: TokenKind
    range: TextRange
    text: str

    @property
    def is_whitespace(self) -> bool:
        return self.kind == TokenKind.WHITE_SPACE


@dataclass(frozen=True, slots=True)
class DocContent:
    """Maximal run of classified and whitespace tokens."""

    tokens: tuple[DocToken, ...]
    range: TextRange

    @property
    def text(self) -> str:
        return _join(self.tokens)

    def significant_tokens(self) -> tuple[DocToken, ...]:
        return tuple(token for token in self.tokens if not token.is_whitespace)


@dataclass(frozen=True, slots=True)
class DocIntro:
    """Free text before the first section header. Always present."""

    tokens: tuple[DocToken, ...]
    range: TextRange

    @property
    def name(self) -> str:
        return INTRO_LABEL

    @property
    def text(self) -> str:
        return _join(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def presentation(self, line_index: LineIndex | None = None) -> Presentation:
        return Presentation(label=INTRO_LABEL, location=line_location(line_index, self.range))


@dataclass(frozen=True, slots=True)
class DocSubsection:
    title: DocToken
    content: DocContent | None
    range: TextRange

    @property
    def name(self) -> str | None:
        return derive_name(self.title.text)

    @property
    def tokens(self) -> tuple[DocToken, ...]:
        """Content tokens, without the title."""
        if self.content is None:
            return ()
        return self.content.tokens

    def all_tokens(self) -> tuple[DocToken, ...]:
        return (self.title, *self.tokens)

    @property
    def text(self) -> str:
        return _join(self.all_tokens())

    def presentation(self, line_index: LineIndex | None = None) -> Presentation:
        return Presentation(label=self.name, location=line_location(line_index, self.range))


SectionChild: TypeAlias = DocContent | DocSubsection


@dataclass(frozen=True, slots=True)
class DocSection:
    """A header plus content runs and subsections, interleaved in source order."""

    header: DocToken
    children: tuple[SectionChild, ...]
    range: TextRange

    @property
    def name(self) -> str | None:
        return derive_name(self.header.text)

    @property
    def subsections(self) -> tuple[DocSubsection, ...]:
        return tuple(child for child in self.children if isinstance(child, DocSubsection))

    @property
    def contents(self) -> tuple[DocContent, ...]:
        return tuple(child for child in self.children if isinstance(child, DocContent))

    @property
    def tokens(self) -> tuple[DocToken, ...]:
        """Loose content tokens, i.e. those not owned by a subsection."""
        return tuple(token for content in self.contents for token in content.tokens)

    def all_tokens(self) -> tuple[DocToken, ...]:
        tokens: list[DocToken] = [self.header]
        for child in self.children:
            if isinstance(child, DocSubsection):
                tokens.extend(child.all_tokens())
            else:
                tokens.extend(child.tokens)
        return tuple(tokens)

    @property
    def text(self) -> str:
        return _join(self.all_tokens())

    def subsection_by_name(self, name: str) -> DocSubsection | None:
        for subsection in self.subsections:
            if subsection.name == name:
                return subsection
        return None

    def presentation(self, line_index: LineIndex | None = None) -> Presentation:
        return Presentation(label=section_label(self.header.text), location=line_location(line_index, self.range))


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed report: intro, sections, then trailer tokens."""

    intro: DocIntro
    sections: tuple[DocSection, ...]
    trailer: tuple[DocToken, ...]

    def iter_tokens(self) -> Iterator[DocToken]:
        yield from self.intro.tokens
        for section in self.sections:
            yield from section.all_tokens()
        yield from self.trailer

    def tokens(self) -> tuple[DocToken, ...]:
        """Every token in document order, whitespace included."""
        return tuple(self.iter_tokens())

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.iter_tokens())

    @property
    def range(self) -> TextRange:
        end = self.trailer[-1].range if self.trailer else None
        if end is None and self.sections:
            end = self.sections[-1].range
        if end is None:
            end = self.intro.range
        return self.intro.range.cover(end)

    def section_by_name(self, name: str) -> DocSection | None:
        """First section whose derived name or presentation label equals `name`."""
        for section in self.sections:
            if section.name == name or section.presentation().label == name:
                return section
        return None

    def find_tokens(self, kind: TokenKind) -> tuple[DocToken, ...]:
        return tuple(token for token in self.iter_tokens() if token.kind == kind)
