"""Helpers shared by the XML manifest translators."""

from __future__ import annotations

from deptree.markup import GenericNode


def is_development_dependency(entry: GenericNode) -> bool:
    """True when the entry carries a non-empty ``developmentDependency`` attribute."""
    return bool(entry.attr("developmentDependency"))
