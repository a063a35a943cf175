"""Discovery and extraction of resources embedded in a binary artifact."""
from __future__ import annotations

import io
import shutil
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Optional

from catalog_utils.logging import get_logger
from catalog_utils.paths import PathLike, resource_suffix

from .artifacts import ArtifactHandle, PackageArtifact, ResourceLocation, load_artifact
from .classifiers import ExtensionClassifier, classify_extension, default_classifier
from .errors import ResourceNotFoundError
from .schema import ResourceInfo, ResourceSummary

LOGGER = get_logger(__name__)

SELF_PACKAGE = __name__.split(".")[0]


def _stream_length(stream: BinaryIO) -> int:
    if stream.seekable():
        position = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        return end - position
    length = 0
    for chunk in iter(lambda: stream.read(io.DEFAULT_BUFFER_SIZE), b""):
        length += len(chunk)
    return length


class ResourceInfoSequence:
    """Restartable view over an artifact's embedded resources.

    Each iteration re-reads the artifact's identifier list, so the view always
    reflects the artifact's current state and nothing is cached.
    """

    def __init__(self, catalog: "ArtifactResourceCatalog") -> None:
        self._catalog = catalog

    def __iter__(self) -> Iterator[ResourceInfo]:
        for identifier in self._catalog.artifact.resource_identifiers():
            info = self._catalog._describe(identifier)
            if info is not None:
                yield info

    def __repr__(self) -> str:
        return f"ResourceInfoSequence(artifact={self._catalog.get_artifact_name()!r})"


class ArtifactResourceCatalog:
    """Answer resource discovery and extraction queries against one artifact.

    With no arguments the catalog binds to the package this code was loaded
    from. Use :meth:`from_path` to load a .NET assembly from disk, or pass an
    already-loaded :class:`ArtifactHandle`.
    """

    def __init__(
        self,
        artifact: Optional[ArtifactHandle] = None,
        *,
        classifier: Optional[ExtensionClassifier] = None,
    ) -> None:
        self._artifact = artifact if artifact is not None else PackageArtifact(SELF_PACKAGE)
        self._classifier = classifier if classifier is not None else default_classifier()

    @classmethod
    def from_path(
        cls, path: PathLike, *, classifier: Optional[ExtensionClassifier] = None
    ) -> "ArtifactResourceCatalog":
        """Load the artifact at ``path``; raises :class:`ArtifactLoadError`."""

        return cls(load_artifact(path), classifier=classifier)

    @property
    def artifact(self) -> ArtifactHandle:
        return self._artifact

    @property
    def classifier(self) -> ExtensionClassifier:
        return self._classifier

    def get_artifact_name(self) -> str:
        return self._artifact.name

    def get_resource_names(self) -> List[str]:
        """Return embedded resource names in the artifact's native order."""

        return [info.name for info in self.get_resource_infos()]

    def get_resource_infos(self) -> Iterable[ResourceInfo]:
        return ResourceInfoSequence(self)

    def get_resource_info_by_name(self, name: str) -> Optional[ResourceInfo]:
        """Return the embedded resource called ``name`` or ``None``."""

        return self._describe(self._qualify(name))

    def summarize(self) -> ResourceSummary:
        return ResourceSummary.from_infos(self.get_resource_infos())

    def open_resource(self, name: str) -> Optional[BinaryIO]:
        """Open the payload of the embedded resource ``name``, or return ``None``."""

        identifier = self._qualify(name)
        if not self._is_embedded(identifier):
            return None
        return self._artifact.open_resource(identifier)

    def extract_resource_to_file(self, name: str, destination_path: PathLike) -> Path:
        """Copy the payload of ``name`` to ``destination_path``, overwriting it."""

        stream = self.open_resource(name)
        if stream is None:
            raise ResourceNotFoundError(name, self.get_artifact_name())
        destination = Path(destination_path)
        with stream, destination.open("wb") as target:
            shutil.copyfileobj(stream, target)
        LOGGER.info("Extracted %s from %s to %s", name, self.get_artifact_name(), destination)
        return destination

    def extract_resource_to_directory(self, name: str, destination_directory: PathLike) -> Path:
        """Extract ``name`` into an existing directory under its own name."""

        return self.extract_resource_to_file(name, Path(destination_directory) / name)

    def close(self) -> None:
        self._artifact.close()

    def __enter__(self) -> "ArtifactResourceCatalog":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ArtifactResourceCatalog(artifact={self._artifact!r}, classifier={self._classifier!r})"

    def _qualify(self, name: str) -> str:
        return f"{self.get_artifact_name()}.{name}"

    def _is_embedded(self, identifier: str) -> bool:
        location = self._artifact.resource_location(identifier)
        return location is not None and bool(location & ResourceLocation.EMBEDDED)

    def _measure(self, identifier: str) -> int:
        try:
            stream = self._artifact.open_resource(identifier)
        except OSError as exc:
            LOGGER.debug("Cannot open %s: %s", identifier, exc)
            return 0
        if stream is None:
            return 0
        with stream:
            return _stream_length(stream)

    def _describe(self, identifier: str) -> Optional[ResourceInfo]:
        prefix = self.get_artifact_name() + "."
        if not identifier.startswith(prefix):
            LOGGER.debug("Skipping %s: outside the %s namespace", identifier, prefix)
            return None
        if not self._is_embedded(identifier):
            LOGGER.debug("Skipping %s: not an embedded resource", identifier)
            return None
        name = identifier[len(prefix):]
        return ResourceInfo(
            name=name,
            type_label=classify_extension(resource_suffix(identifier), self._classifier),
            size_bytes=self._measure(identifier),
        )
