"""
Package discovery for tag-manager.

Finds Go modules (go.mod files) below a set of search roots, derives their
short names and looks up their origin remote and latest tag.
"""

from .discovery import (
    PRUNED_DIRECTORIES,
    DiscoveredPackage,
    default_search_paths,
    discover_packages,
    find_manifests,
    is_pruned,
    scan_directory,
)
from .exceptions import DiscoveryError, ManifestParseError
from .gomod import GoModule, extract_package_name, parse_go_mod

__all__ = [
    "DiscoveredPackage",
    "GoModule",
    "PRUNED_DIRECTORIES",
    "default_search_paths",
    "discover_packages",
    "extract_package_name",
    "find_manifests",
    "is_pruned",
    "parse_go_mod",
    "scan_directory",
    "DiscoveryError",
    "ManifestParseError",
]
