"""Output modules for CLI display and file writing."""

from depcheck_lite.output.json_writer import format_results, write_results
from depcheck_lite.output.report import display_result, display_summary

__all__ = ["display_result", "display_summary", "format_results", "write_results"]
