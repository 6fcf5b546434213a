"""
Diagnostic records shared by the tool locator and the request validator.
"""

from dataclasses import dataclass
from enum import Enum


class ValidationLevel(Enum):
    """Validation severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationResult:
    """A single diagnostic."""

    level: ValidationLevel
    message: str
    location: str | None = None
    suggestion: str | None = None
    code: str | None = None

    def format(self) -> str:
        """Format the diagnostic for display."""
        text = f"{self.level.value.upper()}: {self.message}"
        if self.location:
            text += f" ({self.location})"
        if self.suggestion:
            text += f"\n  Suggestion: {self.suggestion}"
        return text
