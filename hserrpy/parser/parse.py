"""Helpers to build a green tree from parser events."""

from hserrpy.diagnostics import Diagnostic
from hserrpy.parser.event import Event, process_events
from hserrpy.parser.tree_sink import LosslessTreeSink, ParsedGreenTree


def build_lossless_tree(
    text: str,
    events: list[Event],
    diagnostics: list[Diagnostic],
) -> ParsedGreenTree:
    sink = LosslessTreeSink(text=text)
    process_events(sink, events, diagnostics)
    return sink.finish()
