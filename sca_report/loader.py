"""Loading of analysis result snapshots."""
from __future__ import annotations

from pathlib import Path

from sca_report.documents import DocumentReader
from sca_report.exceptions import InputError
from sca_report.models.result import AnalysisResult

_reader = DocumentReader("analysis result", InputError)


def load_analysis_result(path: Path) -> AnalysisResult:
    """Load an analysis result from a JSON or YAML file.

    Files ending in `.json` are read as JSON, all others as YAML.

    Args:
        path: Path to the analysis result file.

    Returns:
        Validated AnalysisResult.

    Raises:
        InputError: If the file cannot be read, cannot be parsed, or does not
            describe a valid analysis result.
    """
    data = _reader.read(path)
    if data is None:
        raise InputError(f"Analysis result '{path}' is empty")
    return _reader.validate(AnalysisResult, data, path)
