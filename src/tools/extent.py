"""
Extent selection for Style-Report.

Decides which span of a document gets analyzed: the active selection when
there is one, otherwise the whole document.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Extent:
    """A half-open span ``[start, end)`` of document text."""

    start: int
    end: int
    is_selection: bool

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.length <= 0

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this extent."""
        return text[self.start : self.end]

    def describe(self) -> str:
        """Human readable name of the extent, used in report headers."""
        return "the selected region" if self.is_selection else "the whole document"


def resolve_extent(
    has_active_selection: bool,
    selection_start: int | None,
    selection_end: int | None,
    document_start: int,
    document_end: int,
) -> Extent:
    """Resolve the span of text to analyze.

    Args:
        has_active_selection: Whether the user has an active selection
        selection_start: Selection bound (ignored without a selection)
        selection_end: Other selection bound (ignored without a selection)
        document_start: First position of the document
        document_end: Position just past the end of the document

    Returns:
        Extent covering the selection, or the whole document when no
        selection is active

    Raises:
        ValueError: If a selection is active but a bound is missing
    """
    if has_active_selection:
        if selection_start is None or selection_end is None:
            raise ValueError("An active selection needs both a start and an end")
        # Selections can be made backwards; bounds are always reported ascending
        start, end = sorted((selection_start, selection_end))
        return Extent(start, end, is_selection=True)

    return Extent(document_start, document_end, is_selection=False)
