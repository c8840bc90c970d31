"""Document tree model, name derivation and address lookup."""

from hserrpy.document.addresses import (
    DEFAULT_MAX_DISTANCE,
    AddressMatch,
    Proximity,
    classify_distance,
    parse_as_address,
    tokens_near_address,
)
from hserrpy.document.lower import lower_syntax_tree, parse_document
from hserrpy.document.model import (
    DocContent,
    DocIntro,
    DocSection,
    DocSubsection,
    DocToken,
    Document,
    Presentation,
    SectionChild,
)
from hserrpy.document.names import INTRO_LABEL, beautify_name, derive_name, is_banner, section_label
from hserrpy.document.navigation import structure_path

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "INTRO_LABEL",
    "AddressMatch",
    "DocContent",
    "DocIntro",
    "DocSection",
    "DocSubsection",
    "DocToken",
    "Document",
    "Presentation",
    "Proximity",
    "SectionChild",
    "beautify_name",
    "classify_distance",
    "derive_name",
    "is_banner",
    "lower_syntax_tree",
    "parse_as_address",
    "parse_document",
    "section_label",
    "structure_path",
    "tokens_near_address",
]
