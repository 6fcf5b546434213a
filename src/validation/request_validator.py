"""
Request validation for Style-Report.

This module checks an analysis request before the external tool is run.
"""

from typing import Any

from ..report.data_models import AnalysisMode, AnalysisRequest
from ..report.errors import (
    EmptyExtentError,
    InvalidExtentError,
    MissingFilePathError,
    StyleReportError,
)
from .diagnostics import ValidationLevel, ValidationResult


# Diagnostic codes mapped to the exception that aborts the run
ERROR_TYPES: dict[str, type[StyleReportError]] = {
    "missing_file_path": MissingFilePathError,
    "file_not_saved": MissingFilePathError,
    "empty_extent": EmptyExtentError,
    "extent_out_of_bounds": InvalidExtentError,
}


class RequestValidator:
    """Checks the preconditions of an analysis request."""

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize validator with configuration.

        Args:
            config: Validation configuration dictionary
        """
        self.config = config or {}
        self.default_rules = {
            "warn_unsaved_changes": True,
        }
        self.rules = {**self.default_rules, **self.config}

    def validate(self, request: AnalysisRequest) -> list[ValidationResult]:
        """Validate a request.

        Args:
            request: The analysis request

        Returns:
            List of diagnostics, errors first
        """
        results = []

        if request.mode is AnalysisMode.FILE:
            # The tool reads the saved file, not the in-memory text
            results.extend(self._validate_file(request))
        else:
            results.extend(self._validate_extent(request))

        return sorted(results, key=lambda r: r.level != ValidationLevel.ERROR)

    def raise_for_errors(self, results: list[ValidationResult]) -> None:
        """Raise the exception matching the first error diagnostic.

        Raises:
            StyleReportError: If any diagnostic is an error
        """
        for result in results:
            if result.level == ValidationLevel.ERROR:
                error_type = ERROR_TYPES.get(result.code or "", StyleReportError)
                raise error_type(result.message)

    def _validate_file(self, request: AnalysisRequest) -> list[ValidationResult]:
        """Whole-document mode reads the saved file, so it must exist."""
        results = []
        document = request.document

        if document.path is None:
            results.append(
                ValidationResult(
                    ValidationLevel.ERROR,
                    "Document has no file on disk",
                    suggestion="Save the document first, or analyze it as a region",
                    code="missing_file_path",
                )
            )
            return results

        if not document.path.is_file():
            results.append(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"Document file not found: {document.path}",
                    location=str(document.path),
                    suggestion="Save the document before analyzing it",
                    code="file_not_saved",
                )
            )
            return results

        if document.path.stat().st_size == 0:
            results.append(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"Nothing to analyze in {document.path}: the saved file is empty",
                    location=str(document.path),
                    suggestion="Save some text to the file first",
                    code="empty_extent",
                )
            )

        if self.rules["warn_unsaved_changes"] and document.is_modified:
            results.append(
                ValidationResult(
                    ValidationLevel.WARNING,
                    f"{document.path} has unsaved changes; the saved version will be analyzed",
                    location=str(document.path),
                    suggestion="Save the document to analyze the current text",
                    code="unsaved_changes",
                )
            )

        return results

    def _validate_extent(self, request: AnalysisRequest) -> list[ValidationResult]:
        results = []
        extent = request.extent
        document = request.document

        if extent.start < document.start or extent.end > document.end:
            results.append(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"Extent {extent.start}-{extent.end} is outside the document "
                    f"(0-{document.end})",
                    location=document.name,
                    code="extent_out_of_bounds",
                )
            )
        elif extent.is_empty:
            results.append(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"Nothing to analyze in {extent.describe()}",
                    location=document.name,
                    suggestion="Select some text or add content to the document",
                    code="empty_extent",
                )
            )

        return results
