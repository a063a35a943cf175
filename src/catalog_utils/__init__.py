"""Utility helpers shared across the resource catalog codebase."""

from .config import AppConfig, load_config
from .hashing import stream_sha1
from .logging import configure_logging, get_logger
from .paths import PathLike, normalise_path, resource_suffix

__all__ = [
    "AppConfig",
    "load_config",
    "stream_sha1",
    "configure_logging",
    "get_logger",
    "PathLike",
    "normalise_path",
    "resource_suffix",
]
