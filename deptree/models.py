"""Data models for the dependency tree translators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DepType(str, Enum):
    """Runtime vs. build/test-time dependency."""

    PROD = "prod"
    DEV = "dev"

    @classmethod
    def of(cls, is_dev: bool) -> DepType:
        return cls.DEV if is_dev else cls.PROD


class ProjectJsonDepType(str, Enum):
    """Values of the ``type`` field in a project.json dependency object."""

    BUILD = "build"
    PROJECT = "project"
    PLATFORM = "platform"
    DEFAULT = "default"


@dataclass(frozen=True)
class PkgTree:
    """Canonical dependency tree node.

    The root carries ``has_dev_dependencies`` and no ``dep_type``; every
    child carries a ``dep_type``. ``cyclic`` is reserved for consumers that
    stitch trees together and is never set here.
    """

    name: str
    version: str
    dependencies: dict[str, PkgTree] = field(default_factory=dict)
    dep_type: DepType | None = None
    has_dev_dependencies: bool | None = None
    cyclic: bool | None = None

    @classmethod
    def leaf(cls, name: str, version: str, is_dev: bool) -> PkgTree:
        return cls(name=name, version=version, dep_type=DepType.of(is_dev))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready shape, omitting unset optional fields."""
        out: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "dependencies": {k: v.to_dict() for k, v in self.dependencies.items()},
        }
        if self.dep_type is not None:
            out["depType"] = self.dep_type.value
        if self.has_dev_dependencies is not None:
            out["hasDevDependencies"] = self.has_dev_dependencies
        if self.cyclic is not None:
            out["cyclic"] = self.cyclic
        return out


@dataclass(frozen=True)
class DependenciesDiscoveryResult:
    """Dependencies found by one extraction pass, before wrapping in a root."""

    dependencies: dict[str, PkgTree] = field(default_factory=dict)
    has_dev_dependencies: bool = False

    @classmethod
    def from_entries(
        cls, entries: list[tuple[PkgTree, bool]], include_dev: bool
    ) -> DependenciesDiscoveryResult:
        """Fold ``(subtree, is_dev)`` pairs into a result.

        The dev flag is taken over every entry; dev subtrees are only kept
        when *include_dev* is set.
        """
        return cls(
            dependencies={
                tree.name: tree for tree, is_dev in entries if include_dev or not is_dev
            },
            has_dev_dependencies=any(is_dev for _, is_dev in entries),
        )

    def merge(self, other: DependenciesDiscoveryResult) -> DependenciesDiscoveryResult:
        """Shallow union; entries of *other* overwrite ours on name collision."""
        return DependenciesDiscoveryResult(
            dependencies={**self.dependencies, **other.dependencies},
            has_dev_dependencies=self.has_dev_dependencies or other.has_dev_dependencies,
        )

    def to_tree(self, name: str = "") -> PkgTree:
        return PkgTree(
            name=name,
            version="",
            dependencies=dict(self.dependencies),
            has_dev_dependencies=self.has_dev_dependencies,
        )


@dataclass(frozen=True)
class ReferenceInclude:
    """Parsed legacy ``<Reference Include="Name, Version=..., ...">`` string."""

    name: str
    version: str | None = None
    culture: str | None = None
    processor_architecture: str | None = None
    public_key_token: str | None = None

    _KEYS = {
        "Version": "version",
        "Culture": "culture",
        "processorArchitecture": "processor_architecture",
        "PublicKeyToken": "public_key_token",
    }

    @classmethod
    def parse(cls, include: str) -> ReferenceInclude:
        name, *pairs = (token.strip() for token in include.split(","))
        fields: dict[str, str] = {}
        for pair in pairs:
            key, _, value = pair.partition("=")
            attr = cls._KEYS.get(key.strip())
            if attr:
                # Only the text up to a second "=" is the value.
                fields[attr] = value.split("=")[0].strip()
        return cls(name=name, **fields)


@dataclass(frozen=True)
class BareVersion:
    """project.json dependency given as a plain version string."""

    version: str


@dataclass(frozen=True)
class DetailedDependency:
    """project.json dependency given as ``{"version": ..., "type": ...}``."""

    version: str
    type: ProjectJsonDepType | None = None

    @property
    def is_dev(self) -> bool:
        return self.type is ProjectJsonDepType.BUILD


ProjectJsonDependency = BareVersion | DetailedDependency
