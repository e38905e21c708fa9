"""Translator for legacy .NET Core project.json files."""

from __future__ import annotations

from typing import Any

import structlog

from deptree.markup import GenericNode
from deptree.models import (
    BareVersion,
    DependenciesDiscoveryResult,
    DetailedDependency,
    PkgTree,
    ProjectJsonDependency,
    ProjectJsonDepType,
)
from deptree.registry import register_translator

log = structlog.get_logger("deptree.translator")


def _dep_type(raw: Any) -> ProjectJsonDepType | None:
    try:
        return ProjectJsonDepType(raw)
    except ValueError:
        return None


def parse_dependency(value: Any) -> ProjectJsonDependency:
    """Resolve a dependency value (bare string or object) into its variant."""
    if isinstance(value, dict):
        version = value.get("version")
        return DetailedDependency(
            version=version if isinstance(version, str) else "",
            type=_dep_type(value.get("type")),
        )
    if value is None:
        return BareVersion("")
    return BareVersion(str(value))


class ProjectJsonTranslator:
    manifest_type = "project-json"
    file_patterns = ["project.json"]

    def translate(self, tree: GenericNode, include_dev: bool = False) -> PkgTree:
        declared = tree.get("dependencies")
        if not isinstance(declared, dict):
            declared = {}

        entries: list[tuple[PkgTree, bool]] = []
        for name, value in declared.items():
            if not name:
                continue
            dep = parse_dependency(value)
            is_dev = isinstance(dep, DetailedDependency) and dep.is_dev
            if is_dev and not include_dev:
                log.debug("translator.dev_dependency_skipped", name=name)
            entries.append((PkgTree.leaf(name, dep.version, is_dev), is_dev))

        return DependenciesDiscoveryResult.from_entries(entries, include_dev).to_tree()


register_translator(ProjectJsonTranslator())
