"""Lexical classifier, structural parser and document model for JVM hs_err crash reports."""

from hserrpy.document import Document, parse_document
from hserrpy.parser import ParseCancelledError, ParseMode, ParserOptions, parse, parse_result

__all__ = [
    "Document",
    "ParseCancelledError",
    "ParseMode",
    "ParserOptions",
    "parse",
    "parse_document",
    "parse_result",
]
