"""
Export functionality for saving readability reports.

This module provides text, Markdown and HTML export formats.
"""
