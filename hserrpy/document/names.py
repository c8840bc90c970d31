"""Display names for sections and subsections."""

from typing import Final

DECORATION_CHARS: Final[str] = "-=*#~_:"
INTRO_LABEL: Final[str] = "INTRO"

_STRIP_CHARS: Final[str] = DECORATION_CHARS + " \t\r\n\f\v"


def derive_name(text: str) -> str | None:
    """Name of a header or title token: its text minus surrounding decoration.

    Line breaks become spaces, then whitespace and decoration characters are
    stripped from both ends. Returns None when nothing is left.
    """
    name = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ").strip(_STRIP_CHARS)
    return name or None


def is_banner(text: str) -> bool:
    return "---" in text


def beautify_name(name: str) -> str:
    """Collapse letter-spaced banner text, `S U M M A R Y` -> `SUMMARY`."""
    parts = name.split()
    if len(parts) > 1 and all(len(part) == 1 for part in parts):
        return "".join(parts)
    return name


def section_label(header_text: str) -> str | None:
    """Presentation label of a section header; banner names lose their letter spacing."""
    name = derive_name(header_text)
    if name is not None and is_banner(header_text):
        return beautify_name(name)
    return name
