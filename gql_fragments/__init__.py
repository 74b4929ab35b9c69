"""Cross-file fragment imports for GraphQL documents."""

__version__ = "0.1.0"
