"""Artifact handles the catalog can bind to."""

from .assembly import AssemblyArtifact, load_artifact
from .base import ArtifactHandle, ResourceLocation
from .package import PackageArtifact

__all__ = [
    "ArtifactHandle",
    "ResourceLocation",
    "AssemblyArtifact",
    "PackageArtifact",
    "load_artifact",
]
