"""Error definitions for the resource catalog."""
from __future__ import annotations

from typing import Any, Dict


class ResourceCatalogError(Exception):
    """Base exception for all resource catalog errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ArtifactLoadError(ResourceCatalogError):
    """The artifact at a path could not be loaded."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot load artifact {path}: {reason}", path=str(path), reason=reason)
        self.path = str(path)


class ResourceNotFoundError(ResourceCatalogError, LookupError):
    """No embedded resource with the requested name exists in the artifact."""

    def __init__(self, name: str, artifact: str) -> None:
        super().__init__(
            f"Embedded resource {name!r} not found in artifact {artifact!r}",
            name=name,
            artifact=artifact,
        )
        self.name = name
        self.artifact = artifact
