"""
Logging package for Style-Report.

Provides centralized, session-based logging functionality.
"""

from .manager import LoggingManager

__all__ = ["LoggingManager"]
