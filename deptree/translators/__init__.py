"""Manifest translators, auto-registered on import."""

from deptree.translators import (
    packages_config,  # noqa: F401
    project_file,  # noqa: F401
    project_json,  # noqa: F401
)
