"""Translator for NuGet packages.config files."""

from __future__ import annotations

import structlog

from deptree.markup import GenericNode
from deptree.models import DependenciesDiscoveryResult, PkgTree
from deptree.registry import register_translator
from deptree.translators.base import is_development_dependency

log = structlog.get_logger("deptree.translator")


class PackagesConfigTranslator:
    manifest_type = "packages-config"
    file_patterns = ["packages.config"]

    def translate(self, tree: GenericNode, include_dev: bool = False) -> PkgTree:
        entries: list[tuple[PkgTree, bool]] = []

        for package in tree.nodes("packages.package"):
            name = package.attr("id")
            if not name:
                log.debug("translator.entry_without_id", manifest=self.manifest_type)
                continue
            is_dev = is_development_dependency(package)
            if is_dev and not include_dev:
                log.debug("translator.dev_dependency_skipped", name=name)
            entries.append((PkgTree.leaf(name, package.attr("version", ""), is_dev), is_dev))

        return DependenciesDiscoveryResult.from_entries(entries, include_dev).to_tree()


register_translator(PackagesConfigTranslator())
