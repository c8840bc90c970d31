"""Shared parse carrier."""

from hserrpy.pipeline.result import HsErrParseResult

__all__ = ["HsErrParseResult"]
