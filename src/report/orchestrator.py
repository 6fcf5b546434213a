"""
Report orchestration for Style-Report.

Runs the external analysis tool over a document or region and assembles
the report on the shared report surface: provenance header, the tool's
output verbatim, then the static reference text.
"""

import logging
import shlex
import subprocess
from typing import Callable, Union

from ..tools.locator import ToolLocator
from ..tools.logging_utils import log_tool_execution
from ..validation.diagnostics import ValidationLevel, ValidationResult
from ..validation.request_validator import RequestValidator
from .data_models import AnalysisMode, AnalysisRequest
from .reference import REFERENCE_ANCHORS, REFERENCE_TEXT
from .surface import ReportSurface, StructuredTextSurface

logger = logging.getLogger(__name__)

SurfaceSource = Union[ReportSurface, Callable[[], ReportSurface]]


def file_header(request: AnalysisRequest) -> str:
    """Header for whole-document runs against the saved file."""
    path = request.document.path
    if request.document.is_modified:
        return (
            f"Warning: {path} has unsaved changes; the statistics below describe "
            "the saved file and may be inaccurate.\n\n"
        )
    return f"Readability statistics for {path}\n\n"


def region_header(request: AnalysisRequest) -> str:
    """Header for in-memory runs over a selection or the whole text."""
    return f"Readability statistics for {request.extent.describe()}\n\n"


class ReportOrchestrator:
    """Produces readability reports on a report surface."""

    def __init__(
        self,
        surface: SurfaceSource,
        locator: ToolLocator,
        reference_text: str = REFERENCE_TEXT,
        validator: RequestValidator | None = None,
        timeout: float | None = None,
        on_diagnostic: Callable[[ValidationResult], None] | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            surface: The shared report surface, or a callable returning it;
                a callable is only invoked once a report is produced
            locator: Locator for the external tool, checked on every run
            reference_text: Text appended verbatim to every report
            validator: Request validator (defaults to RequestValidator())
            timeout: Seconds to wait for the tool; None waits indefinitely
            on_diagnostic: Called with request warnings such as unsaved changes
        """
        self._surface_source = surface
        self._surface: ReportSurface | None = (
            surface if isinstance(surface, ReportSurface) else None
        )
        self.locator = locator
        self.reference_text = reference_text
        self.validator = validator or RequestValidator()
        self.timeout = timeout
        self.on_diagnostic = on_diagnostic

    @property
    def surface(self) -> ReportSurface:
        """The report surface, created on first access when given a factory."""
        if self._surface is None:
            self._surface = self._surface_source()
        return self._surface

    def run_analysis(self, request: AnalysisRequest) -> None:
        """Run the analysis and replace the surface content with its report.

        Leaves the surface untouched when the tool is unavailable. The tool
        is checked before the request, so a missing tool is always reported.

        Raises:
            StyleReportError: If the request cannot run (no saved file, empty extent)
        """
        if not self.locator.is_available():
            logger.info("Analysis tool unavailable, no report produced")
            return

        diagnostics = self.validator.validate(request)
        self.validator.raise_for_errors(diagnostics)
        for diagnostic in diagnostics:
            if diagnostic.level != ValidationLevel.ERROR and self.on_diagnostic:
                self.on_diagnostic(diagnostic)

        output = self._invoke(request)

        self.surface.reset(output)
        self.surface.insert_at_start(self._header(request))
        if self.surface.content and not self.surface.content.endswith("\n"):
            self.surface.append("\n")
        self.surface.append(self.reference_text)

        if isinstance(self.surface, StructuredTextSurface):
            self.surface.enable_structure()
            self.surface.refresh_anchors(REFERENCE_ANCHORS)

        logger.info(
            "Report for %s written to %s", request.document.name, self.surface.name
        )

    def build_command(self, request: AnalysisRequest) -> str:
        """Return the shell command line for the request.

        The configured command is a trusted prefix. In file mode the path is
        shell-escaped and appended; region text is never put on the command
        line.
        """
        if request.mode is AnalysisMode.FILE:
            return f"{request.command} {shlex.quote(str(request.document.path))}"
        return request.command

    def _header(self, request: AnalysisRequest) -> str:
        if request.mode is AnalysisMode.FILE:
            return file_header(request)
        return region_header(request)

    @log_tool_execution("style")
    def _invoke(self, request: AnalysisRequest) -> str:
        """Run the tool to completion and return its combined output."""
        command = self.build_command(request)
        logger.debug("Running: %s", command)

        if request.mode is AnalysisMode.FILE:
            proc = subprocess.run(
                command,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        else:
            proc = subprocess.run(
                command,
                shell=True,
                input=request.text,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )

        if proc.returncode != 0:
            # The report shows whatever the tool printed, failures included
            logger.info("%s exited with status %s", command, proc.returncode)

        return proc.stdout or ""
