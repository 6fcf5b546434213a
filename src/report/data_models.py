"""
Data models for Style-Report.

This module contains the documents and requests passed through the
analysis workflow.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..tools.extent import Extent, resolve_extent


class AnalysisMode(Enum):
    """How the external tool receives the text."""

    FILE = "file"  # saved file on disk, addressed by path
    REGION = "region"  # in-memory text piped on stdin


@dataclass
class Document:
    """Text being analyzed, with its on-disk location if it has one."""

    text: str
    path: Path | None = None
    declared_modified: bool = False

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = Path(self.path)

    @classmethod
    def from_path(cls, path: str | Path, encoding: str = "utf-8") -> "Document":
        """Load a saved document from disk."""
        path = Path(path)
        with open(path, encoding=encoding, errors="replace") as f:
            return cls(text=f.read(), path=path)

    @property
    def start(self) -> int:
        return 0

    @property
    def end(self) -> int:
        return len(self.text)

    @property
    def name(self) -> str:
        return str(self.path) if self.path else "<unsaved document>"

    @property
    def is_modified(self) -> bool:
        """Whether the in-memory text differs from the saved file."""
        if self.declared_modified:
            return True
        if self.path is None or not self.path.is_file():
            return bool(self.text)

        with open(self.path, encoding="utf-8", errors="replace") as f:
            return f.read() != self.text


@dataclass
class AnalysisRequest:
    """A single analysis run. Created per invocation and never persisted."""

    document: Document
    mode: AnalysisMode
    command: str
    extent: Extent

    @classmethod
    def for_file(cls, document: Document, command: str) -> "AnalysisRequest":
        """Whole-document request run against the saved file.

        The extent spans the in-memory text; the tool itself reads the file.
        """
        extent = resolve_extent(False, None, None, document.start, document.end)
        return cls(document=document, mode=AnalysisMode.FILE, command=command, extent=extent)

    @classmethod
    def for_region(
        cls,
        document: Document,
        command: str,
        selection_start: int | None = None,
        selection_end: int | None = None,
    ) -> "AnalysisRequest":
        """In-memory request over the selection, or the whole text without one."""
        has_selection = selection_start is not None and selection_end is not None
        extent = resolve_extent(
            has_selection, selection_start, selection_end, document.start, document.end
        )
        return cls(document=document, mode=AnalysisMode.REGION, command=command, extent=extent)

    @property
    def text(self) -> str:
        """Text covered by the request's extent."""
        return self.extent.slice(self.document.text)
