"""Translator registry: match a manifest file name to its translator."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import PurePath
from typing import Protocol, runtime_checkable

from deptree.errors import UnsupportedManifestError
from deptree.markup import GenericNode
from deptree.models import PkgTree


@runtime_checkable
class ManifestTranslator(Protocol):
    """Interface that every manifest translator must satisfy."""

    manifest_type: str
    file_patterns: list[str]

    def translate(self, tree: GenericNode, include_dev: bool = False) -> PkgTree: ...


TRANSLATOR_REGISTRY: dict[str, ManifestTranslator] = {}


def register_translator(translator: ManifestTranslator) -> None:
    """Register a translator instance by its manifest_type."""
    TRANSLATOR_REGISTRY[translator.manifest_type] = translator


def get_translator(manifest_name: str) -> ManifestTranslator:
    """Return the translator whose file patterns match *manifest_name*.

    Only the base name is considered, case-insensitively, so
    ``src/App/App.CSPROJ`` resolves to the project-file translator.
    """
    base = PurePath(manifest_name.replace("\\", "/")).name.lower()
    for translator in TRANSLATOR_REGISTRY.values():
        if any(fnmatch(base, pattern.lower()) for pattern in translator.file_patterns):
            return translator
    raise UnsupportedManifestError(f"unsupported manifest file: {manifest_name}")
