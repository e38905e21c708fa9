#!/usr/bin/env python3
"""Standalone .NET manifest translator.

Usage:
    python scan_manifest.py path/to/packages.config
    python scan_manifest.py path/to/App.csproj --dev
    python scan_manifest.py path/to/App.csproj --frameworks
    python scan_manifest.py path/to/project.json --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from deptree.builder import build_dep_tree, get_target_frameworks, read_manifest
from deptree.core.logging import setup_logging
from deptree.errors import DepTreeError
from deptree.models import PkgTree

_TRUTHY = {"1", "true", "yes"}


def _env_flag(key: str) -> bool:
    return os.environ.get(key, "").strip().lower() in _TRUTHY


def _print_tree(tree: PkgTree, frameworks: list[str] | None, as_json: bool) -> None:
    if as_json:
        payload = tree.to_dict()
        if frameworks is not None:
            payload = {"tree": payload, "targetFrameworks": frameworks}
        print(json.dumps(payload, indent=2))
        return

    label = tree.name or "(unnamed)"
    print(f"{label}  ({len(tree.dependencies)} dependencies)")
    if tree.has_dev_dependencies:
        print("  manifest declares dev dependencies")
    for name, dep in sorted(tree.dependencies.items()):
        version = dep.version or "?"
        print(f"    {name} {version} [{dep.dep_type.value}]")
    if frameworks is not None:
        print(f"\n  target frameworks: {', '.join(frameworks) or '-'}")


async def _run(
    manifest: Path, include_dev: bool, with_frameworks: bool
) -> tuple[PkgTree, list[str] | None]:
    content = read_manifest(manifest.parent, manifest.name)
    tree = await build_dep_tree(content, manifest.name, include_dev)
    frameworks = await get_target_frameworks(content) if with_frameworks else None
    return tree, frameworks


def main() -> None:
    parser = argparse.ArgumentParser(description="Translate a .NET manifest into a dependency tree")
    parser.add_argument("manifest", help="Path to packages.config, *.csproj, *.vbproj or project.json")
    parser.add_argument(
        "--dev",
        action="store_true",
        dest="include_dev",
        default=_env_flag("DEPTREE_INCLUDE_DEV"),
        help="Include development dependencies (default: $DEPTREE_INCLUDE_DEV)",
    )
    parser.add_argument("--frameworks", action="store_true", help="Also list target frameworks")
    parser.add_argument("--json", action="store_true", dest="as_json", help="Output as JSON")
    args = parser.parse_args()

    setup_logging()

    try:
        tree, frameworks = asyncio.run(
            _run(Path(args.manifest), args.include_dev, args.frameworks)
        )
    except DepTreeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    _print_tree(tree, frameworks, args.as_json)


if __name__ == "__main__":
    main()
