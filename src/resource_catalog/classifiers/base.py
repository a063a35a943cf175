"""Base protocol for extension classifiers and the type-label derivation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from catalog_utils.logging import get_logger

LOGGER = get_logger(__name__)

UNKNOWN_TYPE = "Unknown Type"


class ExtensionClassifier(ABC):
    """Key/value lookup mapping file extensions to type descriptions.

    Keys live in a single namespace, like ``HKEY_CLASSES_ROOT``: an extension
    key (``".txt"``) maps to a type identifier (``"txtfile"``), and the
    identifier maps to its description (``"Text Document"``).
    """

    name = "abstract"

    @abstractmethod
    def lookup(self, key: str) -> Optional[str]:
        """Return the value stored for ``key`` or ``None``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _safe_lookup(classifier: ExtensionClassifier, key: str) -> Optional[str]:
    try:
        value = classifier.lookup(key)
    except Exception as exc:  # backend failures count as no answer
        LOGGER.debug("Classifier %r failed for %s: %s", classifier, key, exc)
        return None
    return value or None


def classify_extension(extension: str, classifier: Optional[ExtensionClassifier] = None) -> str:
    """Return the human-readable type label for ``extension``.

    ``extension`` includes its leading separator (``".pdf"``). Labels come
    from ``classifier`` when it knows both the extension and the type it
    maps to; otherwise a label such as ``"PDF File"`` is synthesised.
    """

    if not extension or extension == ".":
        return UNKNOWN_TYPE
    if classifier is not None:
        identifier = _safe_lookup(classifier, extension)
        if identifier:
            description = _safe_lookup(classifier, identifier)
            if description:
                return description
    return extension.lstrip(".").upper() + " File"
