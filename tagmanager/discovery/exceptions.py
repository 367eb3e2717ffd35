"""
Exception classes for package discovery.
"""


class DiscoveryError(Exception):
    """Raised when a search root cannot be traversed."""

    def __init__(self, root, message: str):
        self.root = root
        super().__init__(f"Failed to scan directory {root}: {message}")


class ManifestParseError(Exception):
    """Raised when a go.mod file cannot be read or has no module directive."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"Failed to parse {path}: {message}")
