"""Build dependency trees from manifest text or files."""

from __future__ import annotations

from pathlib import Path

import structlog

# Ensure translators are registered before any lookup runs.
import deptree.translators  # noqa: F401
from deptree.errors import ManifestNotFoundError, ManifestParseError
from deptree.markup import parse_markup
from deptree.models import PkgTree
from deptree.registry import get_translator
from deptree.translators.project_file import extract_frameworks

log = structlog.get_logger("deptree.builder")


async def build_dep_tree(
    content: str, manifest_name: str, include_dev: bool = False
) -> PkgTree:
    """Translate *content* of the manifest called *manifest_name* into a tree.

    Raises ``UnsupportedManifestError`` for unknown manifest names and
    ``ManifestParseError`` when *content* is not well-formed.
    """
    translator = get_translator(manifest_name)
    tree = translator.translate(parse_markup(content), include_dev)
    log.debug(
        "builder.tree_built",
        manifest=manifest_name,
        manifest_type=translator.manifest_type,
        dependencies=len(tree.dependencies),
        has_dev_dependencies=tree.has_dev_dependencies,
    )
    return tree


async def get_target_frameworks(content: str) -> list[str]:
    """Target frameworks declared by a .csproj / .vbproj document."""
    return extract_frameworks(parse_markup(content))


def read_manifest(root: str | Path, manifest_path: str | Path) -> str:
    """Read ``root / manifest_path`` as UTF-8.

    Raises ManifestNotFoundError if absent and ManifestParseError if the
    bytes are not valid UTF-8.
    """
    path = Path(root) / manifest_path
    if not path.is_file():
        raise ManifestNotFoundError(f"manifest file not found: {path}")
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        log.warning("builder.decode_failed", manifest=str(path), error=str(exc))
        raise ManifestParseError(f"manifest is not valid UTF-8: {path}") from exc


async def build_dep_tree_from_files(
    root: str | Path, manifest_path: str | Path, include_dev: bool = False
) -> PkgTree:
    """Read the manifest at ``root / manifest_path`` and translate it."""
    content = read_manifest(root, manifest_path)
    return await build_dep_tree(content, str(manifest_path), include_dev)
