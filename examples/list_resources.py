"""Example script showing how to use the resource catalog programmatically."""
from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from resource_catalog import ArtifactResourceCatalog


def main(argv: list[str]) -> None:
    if argv:
        catalog = ArtifactResourceCatalog.from_path(argv[0])
    else:
        catalog = ArtifactResourceCatalog()
    with catalog:
        for info in sorted(catalog.get_resource_infos(), key=lambda item: item.name):
            print(info.model_dump_json())
        with tempfile.TemporaryDirectory() as tmp:
            for name in catalog.get_resource_names():
                target = Path(tmp) / Path(name).name
                catalog.extract_resource_to_file(name, target)
                print(f"{name}: {target.stat().st_size} bytes extracted")


if __name__ == "__main__":
    main(sys.argv[1:])
