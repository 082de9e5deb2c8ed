"""Enumerations shared by the transfer workflows.

Kept in the domain layer so both CLI option parsing and the services agree
on the accepted values without importing each other.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

_XML_MEDIA_TYPES = ("application/xml", "text/xml")
_YAML_MEDIA_TYPES = ("application/yaml", "text/yaml", "application/x-yaml")


def base_media_type(content_type: str | None) -> str:
    """Strip parameters (`;charset=...`) and normalise case."""

    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


class TransferFormat(str, Enum):
    """Serialization used when moving job definitions to or from the server."""

    XML = "xml"
    YAML = "yaml"

    @classmethod
    def default(cls) -> "TransferFormat":
        return cls.XML

    @classmethod
    def infer(cls, path: Path) -> "TransferFormat":
        """Guess the format from a file extension (xml unless .yaml/.yml)."""

        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.YAML
        return cls.XML

    @property
    def media_type(self) -> str:
        """Content-type used for request bodies in this format."""

        return _YAML_MEDIA_TYPES[0] if self is TransferFormat.YAML else _XML_MEDIA_TYPES[0]

    @property
    def accepted_media_types(self) -> tuple[str, ...]:
        return _YAML_MEDIA_TYPES if self is TransferFormat.YAML else _XML_MEDIA_TYPES

    def accepts(self, content_type: str | None) -> bool:
        """True when a response declaring `content_type` carries this format."""

        return base_media_type(content_type) in self.accepted_media_types


class UuidPolicy(str, Enum):
    """Whether imported definitions keep their unique identifiers."""

    REMOVE = "remove"
    PRESERVE = "preserve"

    @classmethod
    def from_bool(cls, remove_uuids: bool) -> "UuidPolicy":
        return cls.REMOVE if remove_uuids else cls.PRESERVE


class DuplicatePolicy(str, Enum):
    """Server-side handling of definitions that already exist."""

    CREATE = "create"
    UPDATE = "update"
    SKIP = "skip"
