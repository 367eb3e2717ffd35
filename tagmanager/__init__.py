"""tag-manager: semantic-version tags for Go modules."""

__version__ = "0.1.0"
