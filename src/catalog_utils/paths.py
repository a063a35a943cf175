"""Path utility helpers."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def normalise_path(path: PathLike) -> Path:
    """Return a normalised path handling Windows separators and ``~``."""

    return Path(str(path).replace("\\", "/")).expanduser().resolve()


def resource_suffix(name: str) -> str:
    """Return the trailing ``.ext`` portion of ``name`` (``""`` when absent)."""

    return os.path.splitext(name)[1]
