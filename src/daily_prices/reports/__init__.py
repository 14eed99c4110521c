"""Report rendering."""

from .console import SEPARATOR, print_report, render_report

__all__ = ["SEPARATOR", "print_report", "render_report"]
