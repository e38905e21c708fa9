"""Translator for MSBuild project files (.csproj / .vbproj).

Two declaration mechanisms can coexist in one project file:

* SDK-style ``<PackageReference Include="Name" Version="1.2.3" />``
* legacy ``<Reference Include="Name, Version=1.2.3.0, Culture=neutral, ..." />``

Both are scanned and merged; on a name clash the legacy reference wins.
"""

from __future__ import annotations

import structlog

from deptree.markup import GenericNode
from deptree.models import DependenciesDiscoveryResult, PkgTree, ReferenceInclude
from deptree.registry import register_translator
from deptree.translators.base import is_development_dependency

log = structlog.get_logger("deptree.translator")

_NAME_PROPERTIES = ("PackageId", "AssemblyName")
_FRAMEWORK_PROPERTIES = ("TargetFramework", "TargetFrameworks", "TargetFrameworkVersion")


def _first_group_with(groups: list[GenericNode], keys: tuple[str, ...]) -> GenericNode | None:
    return next((g for g in groups if any(g.has(k) for k in keys)), None)


def _texts(group: GenericNode, key: str) -> list[str]:
    return [node.text() or "" for node in group.nodes(key)]


def extract_project_name(tree: GenericNode) -> str:
    """PackageId, else AssemblyName, of the first PropertyGroup declaring either."""
    group = _first_group_with(tree.nodes("Project.PropertyGroup"), _NAME_PROPERTIES)
    if group is None:
        return ""
    return group.text("PackageId.0") or group.text("AssemblyName.0") or ""


def extract_frameworks(tree: GenericNode) -> list[str]:
    """Target frameworks in declaration order, without deduplication."""
    group = _first_group_with(tree.nodes("Project.PropertyGroup"), _FRAMEWORK_PROPERTIES)
    if group is None:
        return []

    frameworks: list[str] = []
    for value in _texts(group, "TargetFrameworks"):
        frameworks.extend(value.split(";"))
    frameworks.extend(_texts(group, "TargetFrameworkVersion"))
    frameworks.extend(_texts(group, "TargetFramework"))
    return frameworks


def _first_item_group(tree: GenericNode, item: str) -> GenericNode | None:
    return _first_group_with(tree.nodes("Project.ItemGroup"), (item,))


def extract_package_references(
    tree: GenericNode, include_dev: bool = False
) -> DependenciesDiscoveryResult:
    """Dependencies from the first ItemGroup holding PackageReference items."""
    group = _first_item_group(tree, "PackageReference")
    if group is None:
        return DependenciesDiscoveryResult()

    entries: list[tuple[PkgTree, bool]] = []
    for ref in group.nodes("PackageReference"):
        name = ref.attr("Include")
        if not name:
            continue
        is_dev = is_development_dependency(ref)
        if is_dev and not include_dev:
            log.debug("translator.dev_dependency_skipped", name=name)
        # Attribute form takes precedence over a nested <Version> element.
        version = ref.attr("Version") or ref.text("Version.0") or ""
        entries.append((PkgTree.leaf(name, version, is_dev), is_dev))

    return DependenciesDiscoveryResult.from_entries(entries, include_dev)


def extract_reference_includes(
    tree: GenericNode, include_dev: bool = False
) -> DependenciesDiscoveryResult:
    """Dependencies from the first ItemGroup holding legacy Reference items.

    The legacy format has no dev-only marker, so every reference is prod and
    *include_dev* has no effect.
    """
    group = _first_item_group(tree, "Reference")
    if group is None:
        return DependenciesDiscoveryResult()

    entries: list[tuple[PkgTree, bool]] = []
    for ref in group.nodes("Reference"):
        include = ReferenceInclude.parse(ref.attr("Include", ""))
        if not include.name:
            continue
        entries.append((PkgTree.leaf(include.name, include.version or "", False), False))

    return DependenciesDiscoveryResult.from_entries(entries, include_dev)


class ProjectFileTranslator:
    manifest_type = "project-file"
    file_patterns = ["*.csproj", "*.vbproj"]

    def translate(self, tree: GenericNode, include_dev: bool = False) -> PkgTree:
        package_refs = extract_package_references(tree, include_dev)
        legacy_refs = extract_reference_includes(tree, include_dev)
        name = extract_project_name(tree)

        overwritten = package_refs.dependencies.keys() & legacy_refs.dependencies.keys()
        if overwritten:
            log.debug("translator.package_reference_overwritten", names=sorted(overwritten))

        return package_refs.merge(legacy_refs).to_tree(name)


register_translator(ProjectFileTranslator())
