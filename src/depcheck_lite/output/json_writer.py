"""JSON output for analysis results."""

import json
from pathlib import Path

from depcheck_lite.models.results import AnalysisResult


def format_results(result: AnalysisResult) -> str:
    """Render a result as an indented JSON document."""
    return json.dumps(result.to_dict(), indent=2)


def write_results(result: AnalysisResult, output_path: Path) -> None:
    """Write the result to a JSON file."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, indent=2)

