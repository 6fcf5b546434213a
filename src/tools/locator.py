"""
Tool locator for the external readability analyzer.

The readability statistics come from GNU ``style`` (part of the ``diction``
package). This module checks that the configured program is on PATH and
survives a bare self-test run before any analysis is attempted.
"""

import logging
import shlex
import shutil
import subprocess
from enum import Enum
from typing import Callable

from ..validation.diagnostics import ValidationLevel, ValidationResult
from .logging_utils import log_tool_execution

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_HINT = (
    "Install GNU diction, which provides 'style' "
    "(e.g. 'apt-get install diction' or 'brew install diction'), "
    "or download it from https://www.gnu.org/software/diction/"
)


class ToolAvailability(Enum):
    """Outcome of a tool check. Never cached between runs."""

    AVAILABLE = "available"
    MISSING = "missing"
    SELF_TEST_FAILED = "self_test_failed"


class ToolLocator:
    """Checks that the external analysis program can be run."""

    def __init__(
        self,
        command: str,
        install_hint: str = DEFAULT_INSTALL_HINT,
        on_diagnostic: Callable[[ValidationResult], None] | None = None,
    ):
        """Initialize the locator.

        Args:
            command: Configured command line; its first word is the program
            install_hint: Suggestion shown when the program is missing
            on_diagnostic: Called with each diagnostic as it is emitted
        """
        words = shlex.split(command)
        if not words:
            raise ValueError("Command line must name a program")

        self.program = words[0]
        self.install_hint = install_hint
        self.on_diagnostic = on_diagnostic
        self.diagnostics: list[ValidationResult] = []

    def is_available(self) -> bool:
        """Return True if the program is on PATH and passes its self-test."""
        return self.check() is ToolAvailability.AVAILABLE

    def check(self) -> ToolAvailability:
        """Locate and self-test the program.

        Returns:
            The availability of the program right now
        """
        self.diagnostics = []

        executable = shutil.which(self.program)
        if executable is None:
            self._emit(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"'{self.program}' was not found on PATH; "
                    "readability reports need this program",
                    location="PATH",
                    suggestion=self.install_hint,
                    code="tool_missing",
                )
            )
            return ToolAvailability.MISSING

        returncode, output = self._self_test(executable)
        if returncode != 0:
            detail = f": {output.strip()}" if output.strip() else ""
            self._emit(
                ValidationResult(
                    ValidationLevel.ERROR,
                    f"'{self.program}' failed its self-test "
                    f"(exit status {returncode}){detail}",
                    location=executable,
                    suggestion=f"Check that '{executable}' runs from a shell",
                    code="tool_self_test_failed",
                )
            )
            return ToolAvailability.SELF_TEST_FAILED

        logger.debug("Found %s at %s", self.program, executable)
        return ToolAvailability.AVAILABLE

    @log_tool_execution("locator")
    def _self_test(self, executable: str) -> tuple[int, str]:
        """Run the program with no arguments and empty input."""
        try:
            proc = subprocess.run(
                [executable],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            return -1, str(e)

        return proc.returncode, proc.stdout or ""

    def _emit(self, diagnostic: ValidationResult) -> None:
        self.diagnostics.append(diagnostic)
        logger.warning(diagnostic.message)
        if self.on_diagnostic is not None:
            self.on_diagnostic(diagnostic)
