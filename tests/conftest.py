from __future__ import annotations

import io
from typing import BinaryIO, Dict, List, Optional, Tuple

import pytest

from resource_catalog import ArtifactHandle, ArtifactResourceCatalog, ResourceLocation, StaticClassifier

REFERENCE_ASSEMBLY = "ClassLibraryWithEmbeddedResources"

REFERENCE_SIZES = {
    "hypertrm.exe": 28160,
    "fotr.pdf": 697344,
    "bible-kjv.txt": 4452069,
    "hypertrm.dll": 345088,
    "huckleberryfinn.epub": 13523542,
}


def make_payload(name: str, size: int) -> bytes:
    pattern = f"{name}:".encode()
    return (pattern * (size // len(pattern) + 1))[:size]


class TrackingStream(io.BytesIO):
    """In-memory stream remembering whether it was closed."""

    def __init__(self, payload: bytes, registry: List["TrackingStream"]) -> None:
        super().__init__(payload)
        registry.append(self)


class FakeArtifact(ArtifactHandle):
    """In-memory artifact: identifier -> (location flags, payload)."""

    def __init__(
        self,
        name: str,
        entries: List[Tuple[str, Optional[ResourceLocation], Optional[bytes]]],
    ) -> None:
        self._name = name
        self._entries: Dict[str, Tuple[Optional[ResourceLocation], Optional[bytes]]] = {}
        self._order: List[str] = []
        for identifier, location, payload in entries:
            self._order.append(identifier)
            self._entries[identifier] = (location, payload)
        self.opened: List[TrackingStream] = []
        self.identifier_queries = 0
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    def resource_identifiers(self) -> List[str]:
        self.identifier_queries += 1
        return list(self._order)

    def resource_location(self, identifier: str) -> Optional[ResourceLocation]:
        entry = self._entries.get(identifier)
        return entry[0] if entry else None

    def open_resource(self, identifier: str) -> Optional[BinaryIO]:
        entry = self._entries.get(identifier)
        if entry is None or entry[1] is None:
            return None
        return TrackingStream(entry[1], self.opened)

    def close(self) -> None:
        self.closed = True

    def add(self, identifier: str, location: Optional[ResourceLocation], payload: Optional[bytes]) -> None:
        self._order.append(identifier)
        self._entries[identifier] = (location, payload)


@pytest.fixture
def reference_payloads() -> Dict[str, bytes]:
    return {name: make_payload(name, size) for name, size in REFERENCE_SIZES.items()}


@pytest.fixture
def reference_artifact(reference_payloads: Dict[str, bytes]) -> FakeArtifact:
    entries: List[Tuple[str, Optional[ResourceLocation], Optional[bytes]]] = [
        (f"{REFERENCE_ASSEMBLY}.{name}", ResourceLocation.EMBEDDED, payload)
        for name, payload in reference_payloads.items()
    ]
    entries += [
        (f"{REFERENCE_ASSEMBLY}.linked.txt", ResourceLocation.CONTAINED_IN_MANIFEST_FILE, None),
        (f"{REFERENCE_ASSEMBLY}.shared.dll", ResourceLocation.CONTAINED_IN_ANOTHER_ASSEMBLY, None),
        ("Other.Library.readme.txt", ResourceLocation.EMBEDDED, b"foreign"),
        (f"{REFERENCE_ASSEMBLY}.ghost.bin", None, b"no metadata"),
    ]
    return FakeArtifact(REFERENCE_ASSEMBLY, entries)


@pytest.fixture
def windows_classifier() -> StaticClassifier:
    return StaticClassifier.packaged()


@pytest.fixture
def catalog(reference_artifact: FakeArtifact, windows_classifier: StaticClassifier) -> ArtifactResourceCatalog:
    return ArtifactResourceCatalog(reference_artifact, classifier=windows_classifier)
