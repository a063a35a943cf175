"""Artifact handle for .NET assemblies parsed with :mod:`dnfile`."""
from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

import dnfile
from dnfile.codedindex import Implementation

from catalog_utils.logging import get_logger

from ..errors import ArtifactLoadError
from .base import ArtifactHandle, ResourceLocation

LOGGER = get_logger(__name__)

_LENGTH_PREFIX = struct.Struct("<I")


def _text(value: Any) -> str:
    value = getattr(value, "value", value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return "" if value is None else str(value)


def _implementation_table(implementation: Any, raw_value: Optional[int]) -> Optional[str]:
    table = getattr(implementation, "table", None)
    if table is not None:
        return table.name
    # dnfile drops the tag when the target table is absent from the image
    if raw_value:
        return Implementation.table_names[raw_value & ((1 << Implementation.tag_bits) - 1)]
    return None


def _location_from_implementation(implementation: Any, raw_value: Optional[int] = None) -> ResourceLocation:
    """Map a ``ManifestResource.Implementation`` coded index to location flags.

    ``raw_value`` is the undecoded column, used when dnfile could not resolve
    the target table.
    """

    if implementation is None or not implementation.row_index:
        return ResourceLocation.EMBEDDED
    if _implementation_table(implementation, raw_value) == "AssemblyRef":
        return ResourceLocation.CONTAINED_IN_ANOTHER_ASSEMBLY
    return ResourceLocation.CONTAINED_IN_MANIFEST_FILE


class AssemblyArtifact(ArtifactHandle):
    """Expose the ``ManifestResource`` table of a managed PE image."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._pe = dnfile.dnPE(str(self.path))
        net = self._pe.net
        if net is None or net.mdtables is None:
            self._pe.close()
            raise ValueError("image has no CLI metadata")
        self._resources_rva: int = getattr(net.struct, "ResourcesRva", 0) or 0
        self._name = self._read_assembly_name(net.mdtables)
        self._rows: Dict[str, Any] = {}
        self._order: List[str] = []
        table = getattr(net.mdtables, "ManifestResource", None)
        for row in (table.rows if table is not None else []):
            identifier = _text(row.Name)
            if identifier not in self._rows:
                self._order.append(identifier)
            self._rows[identifier] = row
        LOGGER.debug("Loaded assembly %s with %d manifest resources", self._name, len(self._order))

    def _read_assembly_name(self, mdtables: Any) -> str:
        table = getattr(mdtables, "Assembly", None)
        if table is not None and table.rows:
            name = _text(table.rows[0].Name)
            if name:
                return name
        return self.path.stem

    @property
    def name(self) -> str:
        return self._name

    def resource_identifiers(self) -> List[str]:
        return list(self._order)

    def resource_location(self, identifier: str) -> Optional[ResourceLocation]:
        row = self._rows.get(identifier)
        if row is None:
            return None
        raw_value = getattr(row.struct, "Implementation_CodedIndex", None)
        return _location_from_implementation(row.Implementation, raw_value)

    def open_resource(self, identifier: str) -> Optional[BinaryIO]:
        row = self._rows.get(identifier)
        if row is None or not self._resources_rva:
            return None
        if self.resource_location(identifier) != ResourceLocation.EMBEDDED:
            return None
        start = self._resources_rva + int(row.Offset)
        header = self._pe.get_data(start, _LENGTH_PREFIX.size)
        if len(header) < _LENGTH_PREFIX.size:
            LOGGER.debug("Truncated resource header for %s", identifier)
            return None
        (length,) = _LENGTH_PREFIX.unpack(header)
        payload = self._pe.get_data(start + _LENGTH_PREFIX.size, length)
        if len(payload) != length:
            LOGGER.debug("Truncated payload for %s: %d of %d bytes", identifier, len(payload), length)
            return None
        return io.BytesIO(payload)

    def close(self) -> None:
        self._pe.close()


def load_artifact(path: Union[str, Path]) -> AssemblyArtifact:
    """Load the .NET assembly at ``path`` or raise :class:`ArtifactLoadError`."""

    path = Path(path)
    if not path.exists():
        raise ArtifactLoadError(path, "no such file")
    if not path.is_file():
        raise ArtifactLoadError(path, "not a regular file")
    try:
        return AssemblyArtifact(path)
    except Exception as exc:
        LOGGER.debug("Failed to load assembly %s: %s", path, exc)
        raise ArtifactLoadError(path, str(exc) or type(exc).__name__) from exc
