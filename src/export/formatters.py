"""
Export formatters for different output formats.

This module provides formatters for saving a report surface as plain text,
Markdown or a standalone HTML page.
"""

import html
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from ..report.surface import ReportSurface, StructuredTextSurface


@dataclass
class ExportMetadata:
    """Metadata for an exported report."""

    export_timestamp: str
    export_format: str
    source: str
    mode: str
    command: str
    export_version: str = "1.0"


class BaseExporter(ABC):
    """Base class for report exporters."""

    extension = "txt"

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize exporter with configuration.

        Args:
            config: Export configuration dictionary
        """
        self.config = config or {}

    def export(
        self, surface: ReportSurface, output_path: Path, metadata: ExportMetadata | None = None
    ) -> bool:
        """Export the report surface.

        Args:
            surface: Report surface to export
            output_path: Path where to save the exported file
            metadata: Optional export metadata

        Returns:
            True if export successful, False otherwise
        """
        try:
            content = self.render(surface, metadata)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)
            return True
        except OSError as e:
            print(f"❌ {self.extension.upper()} export failed: {e}")
            return False

    @abstractmethod
    def render(self, surface: ReportSurface, metadata: ExportMetadata | None = None) -> str:
        """Render the surface in this exporter's format."""


class TextExporter(BaseExporter):
    """Export the report exactly as shown on the surface."""

    extension = "txt"

    def render(self, surface: ReportSurface, metadata: ExportMetadata | None = None) -> str:
        return surface.content


class MarkdownExporter(BaseExporter):
    """Export the report as Markdown."""

    extension = "md"

    def render(self, surface: ReportSurface, metadata: ExportMetadata | None = None) -> str:
        if isinstance(surface, StructuredTextSurface):
            return surface.to_markdown()
        # Plain surfaces have no structure to keep; show them preformatted
        return "```\n" + surface.content.rstrip("\n") + "\n```\n"


class HTMLReportExporter(BaseExporter):
    """Export the report to a standalone HTML page."""

    extension = "html"

    def render(self, surface: ReportSurface, metadata: ExportMetadata | None = None) -> str:
        if isinstance(surface, StructuredTextSurface):
            body = surface.to_html()
        else:
            body = f"<pre>{html.escape(surface.content)}</pre>"

        html_parts = [
            """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Readability Report</title>
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; margin: 0; padding: 20px; background: #f5f5f5; }
        .container { max-width: 960px; margin: 0 auto; background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
        h1 { color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }
        h2 { color: #34495e; margin-top: 30px; }
        .metadata { background: #ecf0f1; padding: 15px; border-radius: 5px; margin: 20px 0; }
        pre { background: #2c3e50; color: #ecf0f1; padding: 15px; border-radius: 5px; overflow-x: auto; }
        dt { font-weight: bold; }
    </style>
</head>
<body>
    <div class="container">"""
        ]

        if metadata:
            html_parts.append('<div class="metadata">')
            html_parts.append(f"<strong>Generated:</strong> {html.escape(metadata.export_timestamp)}<br>")
            html_parts.append(f"<strong>Source:</strong> {html.escape(metadata.source)}<br>")
            html_parts.append(f"<strong>Mode:</strong> {html.escape(metadata.mode)}<br>")
            html_parts.append(f"<strong>Command:</strong> <code>{html.escape(metadata.command)}</code>")
            html_parts.append("</div>")

        html_parts.append(body)
        html_parts.append(
            """
    </div>
</body>
</html>"""
        )

        return "\n".join(html_parts)


class ExportManager:
    """Manages different export formats and handles export requests."""

    def __init__(self):
        """Initialize export manager with available formatters."""
        self.exporters: dict[str, BaseExporter] = {
            "text": TextExporter(),
            "markdown": MarkdownExporter(),
            "html": HTMLReportExporter(),
        }

    def export_report(
        self,
        surface: ReportSurface,
        output_path: Path,
        format_type: str = "text",
        metadata: dict[str, Any] | None = None,
    ) -> bool:
        """Export a report in the specified format.

        Args:
            surface: Report surface to export
            output_path: Path where to save exported file
            format_type: Export format ('text', 'markdown', 'html')
            metadata: Optional metadata dictionary

        Returns:
            True if export successful
        """
        if format_type not in self.exporters:
            print(f"❌ Unsupported export format: {format_type}")
            return False

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        exporter = self.exporters[format_type]
        return exporter.export(surface, output_path, self._create_metadata(format_type, metadata))

    def render(self, surface: ReportSurface, format_type: str = "text") -> str:
        """Render a report without saving it."""
        return self.exporters[format_type].render(surface)

    def extension_for(self, format_type: str) -> str:
        return self.exporters[format_type].extension

    def _create_metadata(
        self, format_type: str, metadata: dict[str, Any] | None
    ) -> ExportMetadata:
        metadata = metadata or {}
        return ExportMetadata(
            export_timestamp=datetime.now().isoformat(),
            export_format=format_type,
            source=str(metadata.get("source", "")),
            mode=str(metadata.get("mode", "")),
            command=str(metadata.get("command", "")),
        )

    def get_available_formats(self) -> list[str]:
        """Get list of available export formats."""
        return list(self.exporters.keys())
