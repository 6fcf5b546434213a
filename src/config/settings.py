"""
Settings loader for Style-Report.

This module loads the analysis command line and the report reference text
from an optional YAML file, with environment variable overrides.

Environment Variables:
    STYLE_REPORT_CONFIG: Path to the YAML settings file
                         (defaults to style-report.yaml in the working directory)
    STYLE_REPORT_COMMAND: Command line used to run the analysis tool
"""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from ..report.reference import REFERENCE_TEXT
from ..tools.locator import DEFAULT_INSTALL_HINT

load_dotenv()

DEFAULT_COMMAND = "style -L en"
DEFAULT_CONFIG_FILE = "style-report.yaml"


@dataclass
class ReportSettings:
    """User-overridable settings for readability reports."""

    command: str = DEFAULT_COMMAND
    reference_text: str = REFERENCE_TEXT
    install_hint: str = DEFAULT_INSTALL_HINT
    timeout: float | None = None
    structured: bool = True
    output_dir: Path = field(default_factory=lambda: Path("output"))
    log_dir: Path = field(default_factory=lambda: Path("logs"))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.command or not self.command.strip():
            raise ValueError("Analysis command line is required")
        if not self.reference_text:
            raise ValueError("Reference text must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("Timeout must be a positive number of seconds")
        self.output_dir = Path(self.output_dir)
        self.log_dir = Path(self.log_dir)

    @property
    def program(self) -> str:
        """Name of the analysis program (first word of the command line)."""
        return shlex.split(self.command)[0]

    def command_line(
        self, language: str | None = None, long_sentences: int | None = None
    ) -> str:
        """Build the command line with optional extra tool flags.

        Args:
            language: Language selector passed as ``-L``
            long_sentences: Print sentences longer than this many words (``-l``)

        Returns:
            The full command line
        """
        parts = [self.command.strip()]
        if language:
            parts.append(f"-L {shlex.quote(language)}")
        if long_sentences is not None:
            if long_sentences <= 0:
                raise ValueError("Long sentence threshold must be positive")
            parts.append(f"-l {long_sentences}")
        return " ".join(parts)


class SettingsLoader:
    """Loads Style-Report settings."""

    def __init__(self, config_file: Path | None = None):
        """Initialize the settings loader.

        Args:
            config_file: Custom settings file. Overrides environment variable and defaults.
        """
        # Settings file priority: parameter > env var > default in working directory
        if config_file:
            self.config_file = Path(config_file)
        elif os.getenv("STYLE_REPORT_CONFIG"):
            self.config_file = Path(os.getenv("STYLE_REPORT_CONFIG"))
        else:
            self.config_file = Path(DEFAULT_CONFIG_FILE)

    def get_config_info(self) -> dict[str, Any]:
        """Get current configuration information.

        Returns:
            Dictionary with configuration details
        """
        return {
            "config_file": str(self.config_file),
            "config_file_exists": self.config_file.is_file(),
            "env_config_file": os.getenv("STYLE_REPORT_CONFIG"),
            "env_command": os.getenv("STYLE_REPORT_COMMAND"),
            "is_using_env_var": bool(os.getenv("STYLE_REPORT_CONFIG")),
        }

    def load(self) -> ReportSettings:
        """Load settings from the settings file and environment.

        A missing settings file is not an error; defaults are used.

        Returns:
            ReportSettings object

        Raises:
            yaml.YAMLError: If the YAML is invalid
            ValueError: If the configuration is invalid
        """
        data = self._read_config_file()

        reference_file = data.pop("reference_file", None)
        if reference_file and "reference_text" not in data:
            reference_path = Path(reference_file)
            if not reference_path.is_absolute():
                reference_path = self.config_file.parent / reference_path
            with open(reference_path, encoding="utf-8") as f:
                data["reference_text"] = f.read()

        if os.getenv("STYLE_REPORT_COMMAND"):
            data["command"] = os.getenv("STYLE_REPORT_COMMAND")

        try:
            return ReportSettings(**data)
        except TypeError as e:
            raise ValueError(f"Invalid settings in {self.config_file}: {e}") from e

    def _read_config_file(self) -> dict[str, Any]:
        if not self.config_file.is_file():
            return {}

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in {self.config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self.config_file} must contain a mapping")
        return data
