"""Text reports for polylines."""

from .text_report import format_scalar, format_length, render_line, render_summary

__all__ = [
    "format_scalar",
    "format_length",
    "render_line",
    "render_summary",
]
