"""Classifier backed by the Windows registry (``HKEY_CLASSES_ROOT``)."""
from __future__ import annotations

import sys
from typing import Optional

from catalog_utils.logging import get_logger

from .base import ExtensionClassifier

try:
    import winreg
except ImportError:  # non-Windows hosts
    winreg = None  # type: ignore[assignment]


LOGGER = get_logger(__name__)


class RegistryClassifier(ExtensionClassifier):
    """Read default values of ``HKEY_CLASSES_ROOT\\<key>`` through :mod:`winreg`."""

    name = "registry"

    @staticmethod
    def available() -> bool:
        return winreg is not None and sys.platform == "win32"

    def lookup(self, key: str) -> Optional[str]:
        if not self.available() or not key:
            return None
        try:
            value = winreg.QueryValue(winreg.HKEY_CLASSES_ROOT, key)
        except OSError as exc:
            LOGGER.debug("No registry entry for %s: %s", key, exc)
            return None
        return value or None
