"""Base interface for artifacts that carry embedded resources."""
from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional


class ResourceLocation(enum.IntFlag):
    """Where a manifest resource lives relative to the artifact."""

    EMBEDDED = 1
    CONTAINED_IN_ANOTHER_ASSEMBLY = 2
    CONTAINED_IN_MANIFEST_FILE = 4


class ArtifactHandle(ABC):
    """A loaded artifact exposing its raw resource identifiers.

    Identifiers are fully qualified (``"<artifact name>.<resource name>"``)
    and returned in the artifact's native order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Logical artifact name, used as the identifier namespace prefix."""

    @abstractmethod
    def resource_identifiers(self) -> List[str]:
        """Return every raw resource identifier the artifact declares."""

    @abstractmethod
    def resource_location(self, identifier: str) -> Optional[ResourceLocation]:
        """Return location flags for ``identifier`` or ``None`` when unknown."""

    @abstractmethod
    def open_resource(self, identifier: str) -> Optional[BinaryIO]:
        """Return a readable binary stream for ``identifier`` or ``None``."""

    def close(self) -> None:
        """Release any resources held by the handle."""

    def __enter__(self) -> "ArtifactHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
