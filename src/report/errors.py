"""
Exceptions raised when an analysis request cannot run.

Tool availability problems are reported as diagnostics, not exceptions; these
cover the request preconditions that make a run impossible.
"""


class StyleReportError(Exception):
    """Base class for Style-Report precondition failures."""


class MissingFilePathError(StyleReportError):
    """Whole-document mode needs a document saved at a known location."""


class EmptyExtentError(StyleReportError):
    """The resolved extent contains no text to analyze."""


class InvalidExtentError(StyleReportError):
    """The requested extent lies outside the document."""
