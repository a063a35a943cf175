"""Fallback classifier for hosts without any type database."""
from __future__ import annotations

from typing import Optional

from .base import ExtensionClassifier


class NullClassifier(ExtensionClassifier):
    """Never answers, so every label is synthesised from the extension."""

    name = "none"

    def lookup(self, key: str) -> Optional[str]:
        return None
