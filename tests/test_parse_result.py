from hserrpy.parser import ParseMode, ParserOptions, parse, parse_result
from tests._shared_cases import LINUX_REPORT, case_source


def test_parse_result_exposes_green_and_diagnostics() -> None:
    result = parse_result(LINUX_REPORT)

    assert result.green_root() is result.parsed.root
    assert result.diagnostics == []
    assert result.source_text == LINUX_REPORT
    assert result.options == ParserOptions()


def test_parse_result_caches_syntax_document_and_lines() -> None:
    result = parse_result(LINUX_REPORT)

    assert result.syntax_root() is result.syntax_root()
    assert result.document() is result.document()
    assert result.line_index() is result.line_index()


def test_parse_result_document_matches_syntax_root() -> None:
    result = parse_result(case_source("intro_then_section"))

    document = result.document()
    assert document.text == result.syntax_root().text
    assert len(document.sections) == 1


def test_parse_result_mode_matches_parse_contract() -> None:
    source = case_source("unterminated_quote_in_section")

    strict_result = parse_result(source)
    permissive_result = parse_result(source, mode=ParseMode.PERMISSIVE)

    assert strict_result.diagnostics == parse(source).diagnostics
    assert permissive_result.diagnostics == parse(source, mode=ParseMode.PERMISSIVE).diagnostics
    assert permissive_result.options.mode == ParseMode.PERMISSIVE


def test_parse_result_line_index() -> None:
    result = parse_result("a\r\nb\nc")
    lines = result.line_index()

    assert lines.line_count == 3
    assert lines.line_col(result.document().tokens()[-1].range.start) == (3, 1)
