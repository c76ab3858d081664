"""Package and project identifiers."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator


@total_ordering
class Identifier(BaseModel):
    """Identifier of a project or package.

    Identifiers are ordered lexicographically by type, namespace, name and
    version, in that order. They are hashable and can be used as mapping keys
    and sort keys throughout the report model.

    Identifiers validate from a mapping or from the compact coordinates form
    ``"type:namespace:name:version"``.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    EMPTY: ClassVar[Identifier]

    type: str = Field(default="", description="Package manager type, e.g. 'PyPI'")
    namespace: str = Field(default="", description="Namespace or group of the package")
    name: str = Field(default="", description="Package or project name")
    version: str = Field(default="", description="Package or project version")

    @model_validator(mode="before")
    @classmethod
    def _parse_coordinates(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split_coordinates(data)
        return data

    @classmethod
    def from_coordinates(cls, coordinates: str) -> Identifier:
        """Create an identifier from its coordinates string.

        Missing trailing components are left empty.

        Args:
            coordinates: String like "Maven:org.example:lib:1.0".

        Returns:
            Identifier with the parsed components.
        """
        return cls(**_split_coordinates(coordinates))

    def sort_key(self) -> tuple[str, str, str, str]:
        """Return the tuple that defines the ordering of identifiers."""
        return (self.type, self.namespace, self.name, self.version)

    def to_coordinates(self) -> str:
        """Return the identifier in its colon-separated coordinates form."""
        return ":".join(self.sort_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.to_coordinates()


def _split_coordinates(coordinates: str) -> dict[str, str]:
    parts = coordinates.split(":", 3)
    parts += [""] * (4 - len(parts))
    return dict(zip(("type", "namespace", "name", "version"), parts))


Identifier.EMPTY = Identifier()
