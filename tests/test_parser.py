import textwrap

import pytest

from hserrpy.cst import GreenNode, GreenToken
from hserrpy.diagnostics import has_code
from hserrpy.lexer import Lexer, TokenKind
from hserrpy.parser import (
    ParseCancelledError,
    ParseMode,
    ParseNodeList,
    ParsedSyntax,
    Parser,
    ParserOptions,
    TokenSource,
    build_lossless_tree,
    parse,
    parse_content,
)
from hserrpy.parser.grammar import is_blank_line
from hserrpy.syntax import HsErrSyntaxKind
from tests._debug import debug_dump_cst, debug_dump_diagnostics
from tests._shared_cases import HSERR_CASES, LINUX_REPORT, HsErrCase, case_id, case_source


def _collect_node_kinds(root: GreenNode) -> list[HsErrSyntaxKind]:
    kinds: list[HsErrSyntaxKind] = []

    def walk(node: GreenNode) -> None:
        kinds.append(node.kind)
        for child in node.children:
            if isinstance(child, GreenNode):
                walk(child)

    walk(root)
    return kinds


def _collect_tokens(root: GreenNode) -> list[GreenToken]:
    tokens: list[GreenToken] = []

    def walk(node: GreenNode) -> None:
        for child in node.children:
            if isinstance(child, GreenNode):
                walk(child)
            else:
                tokens.append(child)

    walk(root)
    return tokens


def _child_kinds(node: GreenNode) -> list[HsErrSyntaxKind]:
    return [child.kind for child in node.children]


def _node_text(node: GreenNode) -> str:
    return "".join(token.text for token in _collect_tokens(node))


def _sections(root: GreenNode) -> list[GreenNode]:
    return [
        child
        for child in root.children
        if isinstance(child, GreenNode) and child.kind == HsErrSyntaxKind.SECTION
    ]


def _parser_for(text: str) -> Parser:
    return Parser(TokenSource(Lexer(text)))


def test_empty_input_yields_intro_and_trailer_only():
    parsed = parse("")
    debug_dump_cst("empty_input", "", parsed.root)

    assert parsed.root.kind == HsErrSyntaxKind.DOCUMENT
    assert _child_kinds(parsed.root) == [HsErrSyntaxKind.INTRO, HsErrSyntaxKind.TRAILER]
    for child in parsed.root.children:
        assert isinstance(child, GreenNode)
        assert child.children == ()
    assert parsed.diagnostics == []


@pytest.mark.parametrize("case", HSERR_CASES, ids=case_id)
def test_tree_is_lossless(case: HsErrCase):
    parsed = parse(case.source)
    debug_dump_cst(case.name, case.source, parsed.root)

    assert _node_text(parsed.root) == case.source
    assert parsed.root.text_len.value == len(case.source)
    assert all(token.text for token in _collect_tokens(parsed.root))


@pytest.mark.parametrize("case", HSERR_CASES, ids=case_id)
def test_document_shape(case: HsErrCase):
    parsed = parse(case.source)
    kinds = _child_kinds(parsed.root)

    assert kinds[0] == HsErrSyntaxKind.INTRO
    assert kinds[-1] == HsErrSyntaxKind.TRAILER
    assert kinds[1:-1] == [HsErrSyntaxKind.SECTION] * len(case.section_labels)
    assert not has_code(parsed.diagnostics, "PARSER_UNSTRUCTURED_TRAILER")


def test_header_only_input_is_one_empty_section():
    src = "---------------  T H R E A D  ---------------"
    parsed = parse(src)

    sections = _sections(parsed.root)
    assert len(sections) == 1
    assert _child_kinds(sections[0]) == [HsErrSyntaxKind.SECTION_HDR]
    assert parsed.diagnostics == []


def test_intro_then_section_with_subsection():
    src = case_source("intro_then_section")
    parsed = parse(src)
    debug_dump_cst("intro_then_section", src, parsed.root)

    intro = parsed.root.children[0]
    assert isinstance(intro, GreenNode)
    assert _node_text(intro) == "Unexpected error occurred\n"

    [section] = _sections(parsed.root)
    assert _child_kinds(section) == [
        HsErrSyntaxKind.SECTION_HDR,
        HsErrSyntaxKind.CONTENT,
        HsErrSyntaxKind.SUBSECTION,
    ]
    subsection = section.children[2]
    assert isinstance(subsection, GreenNode)
    assert _child_kinds(subsection) == [HsErrSyntaxKind.SUBTITLE, HsErrSyntaxKind.CONTENT]
    words = [token.text for token in _collect_tokens(subsection) if token.kind == HsErrSyntaxKind.WORD]
    assert words == ["workstation"]


def test_subsection_content_stops_at_blank_line():
    src = case_source("subsection_then_loose_content")
    parsed = parse(src)
    debug_dump_cst("subsection_then_loose_content", src, parsed.root)

    [section] = _sections(parsed.root)
    assert _child_kinds(section) == [
        HsErrSyntaxKind.SECTION_HDR,
        HsErrSyntaxKind.CONTENT,
        HsErrSyntaxKind.SUBSECTION,
        HsErrSyntaxKind.CONTENT,
    ]
    before, subsection, after = section.children[1:]
    assert isinstance(before, GreenNode)
    assert isinstance(subsection, GreenNode)
    assert isinstance(after, GreenNode)
    assert _node_text(before) == "\nloose text before\n\n"
    assert _node_text(subsection) == "VM state: not at safepoint"
    assert _node_text(after) == "\n\nloose text after\n"


def test_subsections_on_consecutive_lines():
    src = textwrap.dedent(
        """
        ---------------  S Y S T E M  ---------------
        OS:
        DISTRIB_ID=Ubuntu
        uname: Linux 5.4.0-91-generic
        libc: glibc 2.31
        """
    ).lstrip()
    parsed = parse(src)

    [section] = _sections(parsed.root)
    assert _child_kinds(section) == [
        HsErrSyntaxKind.SECTION_HDR,
        HsErrSyntaxKind.CONTENT,
        HsErrSyntaxKind.SUBSECTION,
        HsErrSyntaxKind.SUBSECTION,
        HsErrSyntaxKind.SUBSECTION,
    ]


def test_subtitle_before_first_section_ends_structure():
    src = "Host: workstation\n---------------  S U M M A R Y ------------\n"
    parsed = parse(src)
    debug_dump_diagnostics("subtitle_before_first_section", parsed.diagnostics, src)

    assert _child_kinds(parsed.root) == [HsErrSyntaxKind.INTRO, HsErrSyntaxKind.TRAILER]
    trailer = parsed.root.children[1]
    assert isinstance(trailer, GreenNode)
    assert _node_text(trailer) == src
    assert has_code(parsed.diagnostics, "PARSER_UNSTRUCTURED_TRAILER")
    [diagnostic] = parsed.diagnostics
    assert diagnostic.range.as_tuple() == (0, len(src) - 1)


def test_report_sections_in_order():
    parsed = parse(LINUX_REPORT)
    debug_dump_cst("linux_report", LINUX_REPORT, parsed.root)
    debug_dump_diagnostics("linux_report", parsed.diagnostics, LINUX_REPORT)

    headers = []
    for section in _sections(parsed.root):
        header = section.children[0]
        assert isinstance(header, GreenToken)
        assert header.kind == HsErrSyntaxKind.SECTION_HDR
        headers.append(header.text)

    assert headers == [
        "---------------  S U M M A R Y ------------",
        "---------------  T H R E A D  ---------------",
        "---------------  P R O C E S S  ---------------",
        "Heap:",
        "Compilation events",
        "Internal exceptions",
        "Dynamic libraries:",
        "VM Arguments:",
        "Environment Variables:",
        "Signal Handlers:",
        "---------------  S Y S T E M  ---------------",
        "END.",
    ]
    assert parsed.diagnostics == []
    assert _collect_node_kinds(parsed.root).count(HsErrSyntaxKind.SUBSECTION) == 23


def test_unterminated_quote_is_reported_but_structure_survives():
    src = case_source("unterminated_quote_in_section")
    parsed = parse(src)

    assert len(_sections(parsed.root)) == 1
    assert [diagnostic.code for diagnostic in parsed.diagnostics] == ["LEXER_UNTERMINATED_STRING"]


def test_depth_limit_sends_remainder_to_trailer():
    src = case_source("intro_then_section")
    parsed = parse(src, ParserOptions(max_depth=3))
    debug_dump_cst("depth_limit", src, parsed.root)
    debug_dump_diagnostics("depth_limit", parsed.diagnostics, src)

    [section] = _sections(parsed.root)
    assert _child_kinds(section) == [HsErrSyntaxKind.SECTION_HDR]

    trailer = parsed.root.children[-1]
    assert isinstance(trailer, GreenNode)
    assert trailer.kind == HsErrSyntaxKind.TRAILER
    assert _node_text(trailer) == "\nHost:\nworkstation\n"
    assert [diagnostic.code for diagnostic in parsed.diagnostics] == [
        "PARSER_RECURSION_LIMIT",
        "PARSER_UNSTRUCTURED_TRAILER",
    ]


def test_depth_limit_of_one_keeps_everything_in_trailer():
    src = case_source("linux_report")
    parsed = parse(src, ParserOptions(max_depth=1))

    assert _child_kinds(parsed.root) == [HsErrSyntaxKind.INTRO, HsErrSyntaxKind.TRAILER]
    assert _node_text(parsed.root) == src
    assert has_code(parsed.diagnostics, "PARSER_RECURSION_LIMIT")


def test_recursion_limit_is_reported_once():
    parsed = parse(LINUX_REPORT, ParserOptions(max_depth=4))
    codes = [diagnostic.code for diagnostic in parsed.diagnostics]
    assert codes.count("PARSER_RECURSION_LIMIT") == 1


def test_list_stops_when_element_makes_no_progress():
    parser = _parser_for("a b c")
    calls = []

    def stalled_element(parser: Parser, level: int) -> ParsedSyntax:
        calls.append(level)
        return ParsedSyntax.present()

    parsed = ParseNodeList(parse_element=stalled_element).parse_list(parser, 1)

    assert parsed.is_present()
    assert parsed.consumed == 0
    assert calls == [1]
    assert parser.position.value == 0


def test_list_stops_at_absent_element():
    parser = _parser_for("a b")
    parsed = ParseNodeList(parse_element=lambda p, level: ParsedSyntax.absent()).parse_list(parser, 1)
    assert parsed.consumed == 0


def test_content_rule_is_greedy():
    parser = _parser_for("a b\n\nc")
    parsed = parse_content(parser, 1)
    assert parsed.consumed == 5
    assert parser.at(TokenKind.EOF)


def test_content_rule_absent_on_title():
    parser = _parser_for("Host: x")
    assert parse_content(parser, 1).is_absent()
    assert parser.events == []


def test_is_blank_line():
    assert is_blank_line("\n\n")
    assert is_blank_line("  \r\n \r\n")
    assert is_blank_line("\r\r")
    assert not is_blank_line("\r\n")
    assert not is_blank_line("   \n  ")


def test_cancellation_raises():
    options = ParserOptions(is_cancelled=lambda: True)
    with pytest.raises(ParseCancelledError) as error:
        parse(LINUX_REPORT, options)
    assert error.value.position.value > 0


def test_cancellation_after_some_sections():
    checks = []

    def is_cancelled() -> bool:
        checks.append(True)
        return len(checks) > 3

    with pytest.raises(ParseCancelledError):
        parse(LINUX_REPORT, ParserOptions(is_cancelled=is_cancelled))
    assert len(checks) == 4


def test_cancellation_hook_not_consulted_without_sections():
    checks = []

    def is_cancelled() -> bool:
        checks.append(True)
        return True

    parsed = parse(case_source("intro_only"), ParserOptions(is_cancelled=is_cancelled))
    assert _child_kinds(parsed.root) == [HsErrSyntaxKind.INTRO, HsErrSyntaxKind.TRAILER]
    assert checks == []


def test_options_and_mode_are_mutually_exclusive():
    with pytest.raises(ValueError):
        parse("x", ParserOptions(), mode=ParseMode.STRICT)


def test_max_depth_must_be_positive():
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_permissive_mode_recognizes_unknown_subsections():
    src = "---  P R O C E S S  ---\nPeriodic native trim: disabled\n"

    strict = parse(src, mode=ParseMode.STRICT)
    permissive = parse(src, mode=ParseMode.PERMISSIVE)

    assert HsErrSyntaxKind.SUBSECTION not in _collect_node_kinds(strict.root)
    assert _collect_node_kinds(permissive.root).count(HsErrSyntaxKind.SUBSECTION) == 1


def test_parse_is_deterministic():
    first = parse(LINUX_REPORT)
    second = parse(LINUX_REPORT)
    assert first == second


def test_uncompleted_marker_is_skipped_on_replay():
    parser = _parser_for("a b")
    parser.start()
    content = parser.start()
    while not parser.at(TokenKind.EOF):
        parser.bump()
    completed = content.complete(parser, HsErrSyntaxKind.CONTENT)

    tree = build_lossless_tree("a b", parser.events, [])

    assert completed.kind == HsErrSyntaxKind.CONTENT
    assert tree.root.kind == HsErrSyntaxKind.DOCUMENT
    assert _child_kinds(tree.root) == [HsErrSyntaxKind.CONTENT]
    assert _node_text(tree.root) == "a b"


def test_tree_sink_rejects_partial_coverage():
    parser = _parser_for("a b")
    parser.bump()

    with pytest.raises(RuntimeError):
        build_lossless_tree("a b", parser.events, [])
