"""Extension classifiers used to derive resource type labels."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import UNKNOWN_TYPE, ExtensionClassifier, classify_extension
from .other import NullClassifier
from .registry import RegistryClassifier
from .static import StaticClassifier


def default_classifier() -> ExtensionClassifier:
    """Return the registry on Windows, otherwise the packaged static table."""

    if RegistryClassifier.available():
        return RegistryClassifier()
    return StaticClassifier.packaged()


def build_classifier(name: str = "auto", file_types_path: Optional[Path] = None) -> ExtensionClassifier:
    """Build a classifier from its configuration name."""

    if name == "auto":
        if file_types_path is not None:
            return StaticClassifier.from_yaml(file_types_path)
        return default_classifier()
    if name == "registry":
        return RegistryClassifier()
    if name == "static":
        if file_types_path is not None:
            return StaticClassifier.from_yaml(file_types_path)
        return StaticClassifier.packaged()
    if name == "none":
        return NullClassifier()
    raise ValueError(f"Unknown classifier {name!r}; expected auto, registry, static or none")


__all__ = [
    "UNKNOWN_TYPE",
    "ExtensionClassifier",
    "classify_extension",
    "NullClassifier",
    "RegistryClassifier",
    "StaticClassifier",
    "default_classifier",
    "build_classifier",
]
