"""
Package discovery.

Walks search roots for go.mod files and builds one DiscoveredPackage per
module, enriched with best-effort git metadata.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from tagmanager.git import GitClient

from .enrich import lookup_latest_tag, lookup_repository
from .exceptions import DiscoveryError, ManifestParseError
from .gomod import MANIFEST_NAME, extract_package_name, parse_go_mod

logger = logging.getLogger(__name__)

# Dependency, build and output directories that never hold packages of interest
PRUNED_DIRECTORIES = frozenset({"vendor", "build", "dist", "node_modules"})


@dataclass(frozen=True)
class DiscoveredPackage:
    module_path: str
    path: Path
    package_name: str
    go_version: Optional[str] = None
    repository: Optional[str] = None
    latest_tag: Optional[str] = None


def is_pruned(dirname: str) -> bool:
    """Whether a directory is skipped during traversal."""
    return dirname.startswith(".") or dirname in PRUNED_DIRECTORIES


def default_search_paths() -> List[Path]:
    """Only the current directory and its children are searched."""
    return [Path.cwd()]


def find_manifests(root: Path) -> Iterator[Path]:
    """
    Yield go.mod files below root, depth-first in sorted directory order.

    Raises:
        DiscoveryError: If a directory cannot be listed
    """

    def _raise(error: OSError):
        raise DiscoveryError(root, str(error)) from error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        # Pruning in place stops os.walk from descending
        dirnames[:] = sorted(d for d in dirnames if not is_pruned(d))
        if MANIFEST_NAME in filenames:
            yield Path(dirpath) / MANIFEST_NAME


def load_package(
    manifest: Path, vcs: Optional[GitClient] = None
) -> DiscoveredPackage:
    """
    Build a DiscoveredPackage from a go.mod file.

    Raises:
        ManifestParseError: If the manifest cannot be parsed
    """
    module = parse_go_mod(manifest)
    package_dir = manifest.parent
    package_name = extract_package_name(module.module_path)

    repository = None
    latest_tag = None
    if vcs is not None:
        repository = lookup_repository(vcs, package_dir)
        latest_tag = lookup_latest_tag(vcs, package_dir, package_name)

    return DiscoveredPackage(
        module_path=module.module_path,
        path=package_dir,
        package_name=package_name,
        go_version=module.go_version,
        repository=repository,
        latest_tag=latest_tag,
    )


def scan_directory(
    root: Path, vcs: Optional[GitClient] = None
) -> List[DiscoveredPackage]:
    """Discover packages below a single root; unparsable manifests are skipped."""
    packages = []
    for manifest in find_manifests(root):
        try:
            packages.append(load_package(manifest, vcs))
        except ManifestParseError as e:
            logger.warning(f"Warning: {e}")
    return packages


def discover_packages(
    search_roots: Sequence[Path], vcs: Optional[GitClient] = None
) -> List[DiscoveredPackage]:
    """
    Discover Go modules below the given search roots.

    Roots are scanned in order. A module found more than once (e.g. through
    overlapping roots) is kept at its first occurrence. The result is sorted
    by module path.

    Args:
        search_roots: Directories to scan
        vcs: Git client used for remote and tag lookups; None disables them

    Returns:
        Discovered packages, unique by module path

    Raises:
        DiscoveryError: If a root (or a directory below it) cannot be traversed
    """
    seen: Dict[str, DiscoveredPackage] = {}
    for root in search_roots:
        logger.debug(f"Scanning {root}")
        for package in scan_directory(Path(root), vcs):
            if package.module_path not in seen:
                seen[package.module_path] = package
            else:
                logger.debug(
                    f"Skipping duplicate module {package.module_path} at {package.path}"
                )

    return sorted(seen.values(), key=lambda package: package.module_path)
