# src/depprune/core/manifest/__init__.py
"""
Manifest: documento TOML editável e ponto de commit em disco.

Componentes:
    - document → `parse`, `ManifestDocument`, `DependencySnapshot`
    - store    → `ManifestStore`, `FileSystemStore`, `CommittedManifest`
"""

from .document import DEPENDENCIES_SECTION, DependencySnapshot, ManifestDocument, parse
from .store import CommittedManifest, FileSystemStore, ManifestStore, fingerprint

__all__ = [
    "DEPENDENCIES_SECTION",
    "DependencySnapshot",
    "ManifestDocument",
    "parse",
    "CommittedManifest",
    "FileSystemStore",
    "ManifestStore",
    "fingerprint",
]
