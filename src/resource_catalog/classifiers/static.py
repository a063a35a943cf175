"""Classifier backed by a static extension/type map, usually loaded from YAML."""
from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from catalog_utils.logging import get_logger

from .base import ExtensionClassifier

LOGGER = get_logger(__name__)

PACKAGED_FILE_TYPES = "file_types.yaml"


class StaticClassifier(ExtensionClassifier):
    """Answer lookups from two in-memory mappings.

    ``extensions`` maps extension keys to type identifiers and ``types`` maps
    identifiers to descriptions. Extension keys are matched case-insensitively.
    """

    name = "static"

    def __init__(
        self,
        extensions: Optional[Mapping[str, str]] = None,
        types: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.extensions: Dict[str, str] = {
            _normalise_extension(str(key)): str(value) for key, value in (extensions or {}).items()
        }
        self.types: Dict[str, str] = {str(key): str(value) for key, value in (types or {}).items()}

    def lookup(self, key: str) -> Optional[str]:
        if key.startswith("."):
            return self.extensions.get(key.lower())
        return self.types.get(key)

    def __repr__(self) -> str:
        return f"StaticClassifier(extensions={len(self.extensions)}, types={len(self.types)})"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StaticClassifier":
        return cls(extensions=data.get("extensions") or {}, types=data.get("types") or {})

    @classmethod
    def from_yaml(cls, path: Path) -> "StaticClassifier":
        """Load the ``extensions``/``types`` tables from a YAML file."""

        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        LOGGER.debug("Loaded static file types from %s", path)
        return cls.from_mapping(data)

    @classmethod
    def packaged(cls) -> "StaticClassifier":
        """Return the classifier built from the file-type table shipped with the package."""

        source = resources.files("resource_catalog") / "data" / PACKAGED_FILE_TYPES
        data = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
        return cls.from_mapping(data)


def _normalise_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if not ext:
        return ext
    return ext if ext.startswith(".") else f".{ext}"
