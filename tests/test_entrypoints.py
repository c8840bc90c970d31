import logging

import pytest

import hserrpy
from hserrpy.diagnostics import Diagnostic, collect_diagnostics, has_code
from hserrpy.diagnostics.codes import LEXER_UNTERMINATED_STRING, PARSER_UNSTRUCTURED_TRAILER
from hserrpy.lexer import TokenKind
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import LineIndex, TextRange, TextSize, slice_text_range
from tests._shared_cases import LINUX_REPORT, case_source


def test_top_level_exports() -> None:
    document = hserrpy.parse_document(LINUX_REPORT)
    result = hserrpy.parse_result(LINUX_REPORT)
    parsed = hserrpy.parse(LINUX_REPORT)

    assert document == result.document()
    assert parsed.root == result.green_root()
    assert isinstance(document, hserrpy.Document)


def test_parse_document_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        hserrpy.parse_document("x", hserrpy.ParserOptions(), mode=hserrpy.ParseMode.PERMISSIVE)


def test_parse_logs_summary_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="hserrpy")
    hserrpy.parse(case_source("intro_then_section"))

    messages = [record.getMessage() for record in caplog.records if record.name == "hserrpy.parser.hserr"]
    assert len(messages) == 1
    assert "strict mode" in messages[0]
    assert "1 sections" in messages[0]
    assert all(record.levelno == logging.DEBUG for record in caplog.records)


def test_parse_logs_cancellation(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="hserrpy")
    options = hserrpy.ParserOptions(is_cancelled=lambda: True)

    with pytest.raises(hserrpy.ParseCancelledError):
        hserrpy.parse(LINUX_REPORT, options)
    assert any("cancelled" in record.getMessage() for record in caplog.records)


def test_cancellation_is_not_an_internal_error() -> None:
    options = hserrpy.ParserOptions(is_cancelled=lambda: True)

    source = case_source("intro_then_section")

    with pytest.raises(hserrpy.ParseCancelledError) as excinfo:
        hserrpy.parse(source, options)
    assert not isinstance(excinfo.value, RuntimeError)
    assert excinfo.value.position.value == source.index("---")


def test_collect_diagnostics_orders_by_range() -> None:
    late = PARSER_UNSTRUCTURED_TRAILER.at(TextRange(10, 20))
    early = LEXER_UNTERMINATED_STRING.at(TextRange(2, 3))

    merged = collect_diagnostics([late], [early])

    assert merged == [early, late]
    assert has_code(merged, "PARSER_UNSTRUCTURED_TRAILER")
    assert not has_code(merged, "PARSER_RECURSION_LIMIT")


def test_diagnostic_spec_builds_warning() -> None:
    diagnostic = LEXER_UNTERMINATED_STRING.at(TextRange(0, 1))

    assert isinstance(diagnostic, Diagnostic)
    assert diagnostic.severity == "warning"
    assert diagnostic.category == "lexer"
    assert diagnostic.hint is not None


def test_syntax_kind_maps_every_token_kind() -> None:
    for kind in TokenKind:
        syntax_kind = HsErrSyntaxKind.from_token_kind(kind)
        assert syntax_kind.is_token
        assert syntax_kind.to_token_kind() == kind

    assert not HsErrSyntaxKind.SECTION.is_token
    assert not HsErrSyntaxKind.TOMBSTONE.is_token
    with pytest.raises(ValueError):
        HsErrSyntaxKind.CONTENT.to_token_kind()


def test_text_range_helpers() -> None:
    first = TextRange.new(TextSize(2), TextSize(5))
    second = TextRange.new(TextSize(8), TextSize(10))

    assert first.cover(second).as_tuple() == (2, 10)
    assert second.cover(first) == first.cover(second)
    assert TextRange.empty(TextSize(3)).as_tuple() == (3, 3)
    assert TextSize(2) + TextSize(3) == TextSize(5)
    assert slice_text_range("abcdefghij", first) == "cde"
    with pytest.raises(ValueError):
        TextRange(5, 2)
    with pytest.raises(ValueError):
        TextSize(1) - TextSize(2)


def test_line_index_handles_mixed_line_endings() -> None:
    text = "one\r\ntwo\rthree\nfour"
    lines = LineIndex(text)

    assert lines.line_count == 4
    assert lines.line_col(TextSize(0)) == (1, 1)
    assert lines.line_col(TextSize(text.index("two"))) == (2, 1)
    assert lines.line_col(TextSize(text.index("three") + 2)) == (3, 3)
    assert lines.line_of(TextSize(len(text))) == 4
