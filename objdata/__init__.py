"""Asset, project and reference data types, storage keys, catalog entry encoding and encryption."""

__version__ = "0.1.0"

__all__ = [
    "asset",
    "content",
    "encryption",
    "errors",
    "project",
    "proto",
    "reference",
    "storage",
]