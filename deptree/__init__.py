"""Normalize .NET manifests (packages.config, .csproj/.vbproj, project.json) into a dependency tree."""

from deptree.builder import (
    build_dep_tree,
    build_dep_tree_from_files,
    get_target_frameworks,
)
from deptree.errors import (
    DepTreeError,
    InvalidUserInputError,
    ManifestNotFoundError,
    ManifestParseError,
    UnsupportedManifestError,
)
from deptree.models import DepType, PkgTree

__all__ = [
    "DepTreeError",
    "DepType",
    "InvalidUserInputError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "PkgTree",
    "UnsupportedManifestError",
    "build_dep_tree",
    "build_dep_tree_from_files",
    "get_target_frameworks",
]
