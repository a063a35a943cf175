"""Artifact handle for data files shipped inside an importable Python package."""
from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO, Iterator, List, Optional

from catalog_utils.logging import get_logger

from ..errors import ArtifactLoadError
from .base import ArtifactHandle, ResourceLocation

LOGGER = get_logger(__name__)

CODE_SUFFIXES = (".py", ".pyc", ".pyo", ".pyi")
SKIPPED_DIRS = ("__pycache__",)


def _is_resource_file(entry: Traversable) -> bool:
    return entry.is_file() and not entry.name.endswith(CODE_SUFFIXES)


class PackageArtifact(ArtifactHandle):
    """Treat a package's non-code files as its embedded resources.

    Resource names are the files' package-relative POSIX paths, so
    ``resource_catalog/data/file_types.yaml`` is exposed as
    ``"data/file_types.yaml"``.
    """

    def __init__(self, package: str) -> None:
        self.package = package
        try:
            self._root = resources.files(package)
        except (ModuleNotFoundError, TypeError) as exc:
            raise ArtifactLoadError(package, str(exc)) from exc

    @property
    def name(self) -> str:
        return self.package

    def _walk(self, directory: Traversable, prefix: str) -> Iterator[str]:
        for entry in sorted(directory.iterdir(), key=lambda item: item.name):
            if entry.is_dir():
                if entry.name not in SKIPPED_DIRS:
                    yield from self._walk(entry, f"{prefix}{entry.name}/")
            elif _is_resource_file(entry):
                yield prefix + entry.name

    def _resolve(self, identifier: str) -> Optional[Traversable]:
        prefix = self.package + "."
        if not identifier.startswith(prefix):
            return None
        parts = identifier[len(prefix):].split("/")
        if any(part in ("", ".", "..") or part in SKIPPED_DIRS for part in parts):
            return None
        entry = self._root
        for part in parts:
            entry = entry / part
        return entry if _is_resource_file(entry) else None

    def resource_identifiers(self) -> List[str]:
        return [f"{self.package}.{relative}" for relative in self._walk(self._root, "")]

    def resource_location(self, identifier: str) -> Optional[ResourceLocation]:
        if self._resolve(identifier) is None:
            return None
        return ResourceLocation.EMBEDDED

    def open_resource(self, identifier: str) -> Optional[BinaryIO]:
        entry = self._resolve(identifier)
        if entry is None:
            return None
        try:
            return entry.open("rb")
        except OSError as exc:
            LOGGER.debug("Cannot open %s: %s", identifier, exc)
            return None
