"""
Tools package for Style-Report.

Locates the external analysis program and resolves the text extent to analyze.
"""

from .extent import Extent, resolve_extent
from .locator import DEFAULT_INSTALL_HINT, ToolAvailability, ToolLocator

__all__ = [
    "DEFAULT_INSTALL_HINT",
    "Extent",
    "ToolAvailability",
    "ToolLocator",
    "resolve_extent",
]
