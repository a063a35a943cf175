from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from resource_catalog import ResourceInfo, ResourceSummary


def test_resource_info_structural_equality_and_hash() -> None:
    first = ResourceInfo(name="fotr.pdf", type_label="PDF File", size_bytes=697344)
    second = ResourceInfo(name="fotr.pdf", type_label="PDF File", size_bytes=697344)
    assert first == second
    assert first is not second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    "changes",
    [{"name": "other.pdf"}, {"type_label": "Document"}, {"size_bytes": 1}],
)
def test_resource_info_differs_on_any_field(changes: dict) -> None:
    base = {"name": "fotr.pdf", "type_label": "PDF File", "size_bytes": 697344}
    assert ResourceInfo(**base) != ResourceInfo(**{**base, **changes})


def test_resource_info_is_immutable() -> None:
    info = ResourceInfo(name="a.txt", type_label="Text Document", size_bytes=1)
    with pytest.raises(ValidationError):
        info.size_bytes = 2  # type: ignore[misc]


def test_resource_info_validation() -> None:
    with pytest.raises(ValidationError):
        ResourceInfo(name="a.txt", type_label="Text Document", size_bytes=-1)
    with pytest.raises(ValidationError):
        ResourceInfo(name="a.txt", type_label="", size_bytes=0)


def test_resource_info_jsonl() -> None:
    info = ResourceInfo(name="hypertrm.dll", type_label="Application Extension", size_bytes=345088)
    assert json.loads(info.jsonl()) == {
        "name": "hypertrm.dll",
        "type_label": "Application Extension",
        "size_bytes": 345088,
    }


def test_summary_from_infos() -> None:
    infos = [
        ResourceInfo(name="a.txt", type_label="Text Document", size_bytes=10),
        ResourceInfo(name="b.txt", type_label="Text Document", size_bytes=5),
        ResourceInfo(name="c.dll", type_label="Application Extension", size_bytes=7),
    ]
    summary = ResourceSummary.from_infos(iter(infos))
    assert summary.total_entries == 3
    assert summary.total_size_bytes == 22
    assert summary.type_labels == {"Text Document": 2, "Application Extension": 1}


def test_summary_of_nothing() -> None:
    summary = ResourceSummary.from_infos([])
    assert summary.total_entries == 0
    assert summary.type_labels == {}
