"""
Centralized logging manager for Style-Report.

This module provides session-based logging with timestamped directories
for each analysis run, organizing logs by workflow events and tools.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingManager:
    """Manages session-based logging for Style-Report."""

    _instance: Optional["LoggingManager"] = None

    def __init__(self, base_log_dir: str | Path = "logs"):
        """Initialize the logging manager.

        Args:
            base_log_dir: Base directory for all logs
        """
        self.base_log_dir = Path(base_log_dir)
        self.session_id: str | None = None
        self.session_dir: Path | None = None
        self.session_info: dict[str, Any] = {}
        self.loggers: dict[str, logging.Logger] = {}

    @classmethod
    def get_instance(cls) -> "LoggingManager":
        """Get the singleton instance of LoggingManager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (useful for testing)."""
        if cls._instance is not None:
            cls._instance.end_session()
        cls._instance = None

    def start_session(
        self,
        source: str = "",
        mode: str = "",
        command: str = "",
    ) -> str:
        """Start a new logging session.

        Args:
            source: Document or region being analyzed
            mode: Analysis mode ("file" or "region")
            command: Command line used to run the analysis tool

        Returns:
            Session ID
        """
        # Generate session ID with timestamp
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.session_id = f"session_{timestamp}"

        # Create session directory structure
        self.session_dir = self.base_log_dir / self.session_id
        self.session_dir.mkdir(parents=True, exist_ok=True)
        (self.session_dir / "tools").mkdir(exist_ok=True)

        self.session_info = {
            "session_id": self.session_id,
            "start_time": datetime.now().isoformat(),
            "source": source,
            "mode": mode,
            "command": command,
            "end_time": None,
            "duration_seconds": None,
        }

        self._save_session_info()
        self._update_latest_symlink()
        self._setup_workflow_logger()

        return self.session_id

    def end_session(self) -> None:
        """End the current logging session."""
        if self.session_info and self.session_info.get("end_time") is None:
            self.session_info["end_time"] = datetime.now().isoformat()

            start_time = datetime.fromisoformat(self.session_info["start_time"])
            end_time = datetime.fromisoformat(self.session_info["end_time"])
            self.session_info["duration_seconds"] = (end_time - start_time).total_seconds()

            self._save_session_info()

        # Clean up loggers
        for logger in self.loggers.values():
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)

        self.loggers.clear()

        # Later tool calls run unlogged until the next session starts
        self.session_dir = None
        self.session_id = None

    def get_workflow_logger(self) -> logging.Logger:
        """Get the workflow logger.

        Returns:
            Logger instance for workflow events
        """
        if not self.session_dir:
            raise RuntimeError("No active logging session. Call start_session() first.")

        return self.loggers.get("workflow", logging.getLogger("style_report.workflow"))

    def get_tool_logger(self, tool_name: str) -> logging.Logger:
        """Get or create a logger for a specific tool.

        Args:
            tool_name: Name of the tool

        Returns:
            Logger instance for the tool
        """
        if not self.session_dir:
            raise RuntimeError("No active logging session. Call start_session() first.")

        logger_key = f"tool_{tool_name}"

        if logger_key not in self.loggers:
            safe_tool_name = tool_name.replace(" ", "_").lower()
            self.loggers[logger_key] = self._create_file_logger(
                f"style_report.tool.{safe_tool_name}",
                self.session_dir / "tools" / f"{safe_tool_name}.log",
            )

        return self.loggers[logger_key]

    def log_event(self, event: str, details: dict[str, Any] | None = None) -> None:
        """Log a workflow-level event.

        Args:
            event: Event description
            details: Optional additional details
        """
        logger = self.get_workflow_logger()
        message = event
        if details:
            message += f" - Details: {json.dumps(details, default=str)}"
        logger.info(message)

    def get_session_dir(self) -> Path | None:
        """Get the current session directory.

        Returns:
            Path to current session directory, or None if no active session
        """
        return self.session_dir

    def get_session_id(self) -> str | None:
        """Get the current session ID.

        Returns:
            Current session ID, or None if no active session
        """
        return self.session_id

    def _setup_workflow_logger(self) -> None:
        """Set up the workflow logger."""
        if not self.session_dir:
            return

        self.loggers["workflow"] = self._create_file_logger(
            "style_report.workflow", self.session_dir / "workflow.log"
        )

    def _create_file_logger(self, name: str, log_file: Path) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(logging.INFO)

        # Remove any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

        # Prevent propagation to root logger
        logger.propagate = False

        return logger

    def _save_session_info(self) -> None:
        """Save session information to JSON file."""
        if not self.session_dir:
            return

        info_file = self.session_dir / "session_info.json"
        with open(info_file, "w", encoding="utf-8") as f:
            json.dump(self.session_info, f, indent=2, default=str)

    def _update_latest_symlink(self) -> None:
        """Update the 'latest' symlink to point to current session."""
        if not self.session_dir or not self.session_id:
            return

        latest_link = self.base_log_dir / "latest"

        if latest_link.is_symlink() or latest_link.exists():
            latest_link.unlink()

        try:
            latest_link.symlink_to(self.session_id)
        except OSError:
            # Symlinks might not be supported on all systems
            pass
