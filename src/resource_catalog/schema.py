"""Pydantic models describing embedded resources and summarisation helpers."""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceInfo(BaseModel):
    """Immutable description of a single embedded resource.

    Instances compare and hash by value so whole catalogs can be compared
    with ``==``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type_label: str
    size_bytes: int = Field(default=0, ge=0)

    @field_validator("type_label")
    @classmethod
    def validate_type_label(cls, value: str) -> str:
        if not value:
            raise ValueError("type_label must be non-empty")
        return value

    def as_record(self) -> Dict[str, Any]:
        """Return a JSON-serialisable mapping representing this resource."""

        return self.model_dump()

    def jsonl(self) -> str:
        """Serialise the resource to a JSONL-compatible string."""

        return json.dumps(self.as_record(), ensure_ascii=False)


class ResourceSummary(BaseModel):
    """Aggregate summary information of an artifact's embedded resources."""

    total_entries: int
    total_size_bytes: int
    type_labels: Dict[str, int]

    @classmethod
    def from_infos(cls, infos: Iterable[ResourceInfo]) -> "ResourceSummary":
        infos_list = list(infos)
        total_size = sum(info.size_bytes for info in infos_list)
        counts: Dict[str, int] = {}
        for info in infos_list:
            counts[info.type_label] = counts.get(info.type_label, 0) + 1
        return cls(total_entries=len(infos_list), total_size_bytes=total_size, type_labels=counts)
