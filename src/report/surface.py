"""
Report surfaces for Style-Report.

A report surface is the named, reusable destination for analysis output.
There is at most one per process: it is created on first use, reused by
every later run, and its content is replaced rather than accumulated.

Two variants exist. ``PlainTextSurface`` only holds text.
``StructuredTextSurface`` can additionally switch into a structured mode in
which headings become named cross-reference anchors and the report can be
rendered as HTML through the ``markdown`` library.
"""

import re
from typing import Iterable, Optional

import markdown
from markdown.extensions.toc import slugify

DEFAULT_SURFACE_NAME = "*Style Report*"

MARKDOWN_EXTENSIONS = ["toc", "fenced_code", "def_list"]


def anchor_id(name: str) -> str:
    """Return the HTML id used for an anchor (same slugs as the toc extension)."""
    return slugify(name, "-")


class ReportSurface:
    """Base class for report destinations."""

    _instance: Optional["ReportSurface"] = None

    def __init__(self, name: str = DEFAULT_SURFACE_NAME):
        self.name = name
        self._content = ""
        # Span of the captured tool output within the content
        self._body_start = 0
        self._body_end = 0

    @classmethod
    def get_instance(
        cls, name: str = DEFAULT_SURFACE_NAME, structured: bool = True
    ) -> "ReportSurface":
        """Get the process-wide report surface, creating it on first use.

        Args:
            name: Name of the surface, used only on creation
            structured: Create a StructuredTextSurface rather than plain text

        Returns:
            The shared report surface
        """
        if ReportSurface._instance is None:
            surface_class = StructuredTextSurface if structured else PlainTextSurface
            ReportSurface._instance = surface_class(name)
        return ReportSurface._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared surface (useful for testing)."""
        ReportSurface._instance = None

    @property
    def content(self) -> str:
        return self._content

    @property
    def body(self) -> str:
        """The captured tool output without header or reference."""
        return self._content[self._body_start : self._body_end]

    def is_empty(self) -> bool:
        return not self._content

    def reset(self, text: str = "") -> None:
        """Replace all content with ``text``, which becomes the report body."""
        self._content = text
        self._body_start = 0
        self._body_end = len(text)

    def insert_at_start(self, text: str) -> None:
        """Insert ``text`` before everything else on the surface."""
        self._content = text + self._content
        self._body_start += len(text)
        self._body_end += len(text)

    def append(self, text: str) -> None:
        """Add ``text`` after everything else on the surface."""
        self._content += text

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, length={len(self)})"


class PlainTextSurface(ReportSurface):
    """A surface that only displays plain text."""


class StructuredTextSurface(ReportSurface):
    """A surface that can render the report as a structured document."""

    def __init__(self, name: str = DEFAULT_SURFACE_NAME):
        super().__init__(name)
        self.structured = False
        self.anchors: dict[str, int] = {}

    def reset(self, text: str = "") -> None:
        super().reset(text)
        self.structured = False
        self.anchors = {}

    def enable_structure(self) -> None:
        """Switch the surface into structured mode."""
        self.structured = True

    def refresh_anchors(self, names: Iterable[str]) -> dict[str, int]:
        """Locate the headings named by ``names`` after the report body.

        A heading is a line matching the name (case-insensitively) followed by
        a setext underline. Names without a heading are left out.

        Args:
            names: Anchor names to look for

        Returns:
            Mapping of anchor name to the offset of its heading
        """
        wanted = {name.lower(): name for name in names}
        self.anchors = {}

        offset = 0
        lines = self._content.splitlines(keepends=True)
        for index, line in enumerate(lines):
            title = line.strip()
            if (
                offset >= self._body_end
                and title.lower() in wanted
                and index + 1 < len(lines)
                and re.fullmatch(r"\s*(-+|=+)\s*", lines[index + 1])
            ):
                self.anchors.setdefault(wanted[title.lower()], offset)
            offset += len(line)

        return self.anchors

    def anchor_text(self, name: str) -> str | None:
        """Return the section of the report that starts at anchor ``name``."""
        if name not in self.anchors:
            return None

        start = self.anchors[name]
        following = sorted(pos for pos in self.anchors.values() if pos > start)
        end = following[0] if following else len(self._content)
        return self._content[start:end]

    def to_markdown(self) -> str:
        """Return the report as Markdown, with the tool output kept verbatim."""
        body = self.body
        if body and not body.endswith("\n"):
            body += "\n"

        parts = [self._content[: self._body_start]]
        if body:
            parts.append("```\n" + body + "```\n\n")
        parts.append(self._content[self._body_end :].lstrip("\n"))

        if self.structured and self.anchors:
            links = [f"[{name}](#{anchor_id(name)})" for name in self.anchors]
            parts.append("\n---\n\nSee also: " + " | ".join(links) + "\n")

        return "".join(parts)

    def to_html(self) -> str:
        """Render the report through Markdown into an HTML fragment."""
        return markdown.markdown(self.to_markdown(), extensions=MARKDOWN_EXTENSIONS)
