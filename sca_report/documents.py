"""Reading YAML and JSON documents into validated models."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from sca_report.exceptions import ReportError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


class DocumentReader:
    """Read mapping documents and report every failure as one error type.

    Files ending in `.json` are parsed as JSON, all others as YAML.

    Args:
        kind: Human readable name of the document, used in error messages.
        error_type: Exception raised for unreadable or invalid documents.
    """

    def __init__(self, kind: str, error_type: type[ReportError]) -> None:
        self.kind = kind
        self.error_type = error_type

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read the mapping stored in a file.

        Returns:
            The mapping, or None if the document is empty or only holds comments.

        Raises:
            ReportError: Of the reader's error type, if the file cannot be
                read or decoded, or its root is not a mapping.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise self.error_type(f"Cannot read {self.kind} '{path}': {e}") from e

        data = self._parse(path, content)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise self.error_type(
                f"Invalid {self.kind} in '{path}': "
                f"expected a mapping at root level, got {type(data).__name__}"
            )
        return data

    def validate(self, model: type[ModelT], data: dict[str, Any], path: Path) -> ModelT:
        """Validate a mapping read from `path` against a model."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise self.error_type(
                f"Invalid {self.kind} in '{path}': {format_validation_errors(e)}"
            ) from e

    def _parse(self, path: Path, content: str) -> Any:
        if path.suffix.lower() == ".json":
            if not content.strip():
                return None
            try:
                return json.loads(content)
            except json.JSONDecodeError as e:
                raise self.error_type(f"Invalid JSON in '{path}': {e}") from e

        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise self.error_type(f"Invalid YAML syntax in '{path}': {e}") from e
