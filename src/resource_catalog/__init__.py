"""Catalog and extract resources embedded in compiled artifacts."""

from .artifacts import ArtifactHandle, AssemblyArtifact, PackageArtifact, ResourceLocation, load_artifact
from .catalog import ArtifactResourceCatalog, ResourceInfoSequence
from .classifiers import (
    UNKNOWN_TYPE,
    ExtensionClassifier,
    NullClassifier,
    RegistryClassifier,
    StaticClassifier,
    build_classifier,
    classify_extension,
    default_classifier,
)
from .errors import ArtifactLoadError, ResourceCatalogError, ResourceNotFoundError
from .schema import ResourceInfo, ResourceSummary

__version__ = "0.1.0"

__all__ = [
    "ArtifactResourceCatalog",
    "ResourceInfoSequence",
    "ResourceInfo",
    "ResourceSummary",
    "ArtifactHandle",
    "AssemblyArtifact",
    "PackageArtifact",
    "ResourceLocation",
    "load_artifact",
    "UNKNOWN_TYPE",
    "ExtensionClassifier",
    "NullClassifier",
    "RegistryClassifier",
    "StaticClassifier",
    "build_classifier",
    "classify_extension",
    "default_classifier",
    "ResourceCatalogError",
    "ArtifactLoadError",
    "ResourceNotFoundError",
]
