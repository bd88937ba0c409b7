# src/depprune/core/manifest/store.py
"""
Ponto de commit de manifests em disco.

O oráculo só enxerga o projeto pelo sistema de arquivos: toda mutação
tentada precisa estar em disco **antes** de cada consulta. Este módulo
torna esse requisito explícito:

    commit(path, document) -> CommittedManifest

Um `CommittedManifest` é a prova de que aquele estado exato (texto +
sha256) foi escrito e pode ser observado pelo oráculo.

Decisões arquiteturais:
    - O documento é serializado por completo antes de abrir o arquivo
      (nunca se escreve um documento parcialmente montado)
    - A escrita é feita em uma única chamada, com truncamento
    - `OSError` vira `ManifestIOError` (fatal para a run)

Componentes:
    - ManifestStore       → protocolo (read + commit)
    - FileSystemStore     → implementação canônica em disco
    - CommittedManifest   → registro imutável de um commit
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from depprune.core.errors import manifest_io_error

from .document import ManifestDocument


@dataclass(frozen=True)
class CommittedManifest:
    """Estado de um manifest efetivamente persistido."""

    path: Path
    text: str
    sha256: str


def fingerprint(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@runtime_checkable
class ManifestStore(Protocol):
    """Contrato de leitura e commit de manifests."""

    def read(self, path: Path) -> str:
        ...

    def commit(self, path: Path, document: ManifestDocument) -> CommittedManifest:
        ...


class FileSystemStore:
    """Store canônico: lê e grava manifests diretamente no disco (UTF-8)."""

    encoding = "utf-8"

    def read(self, path: Path) -> str:
        try:
            # newline="" preserva CRLF no round-trip
            with Path(path).open("r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise manifest_io_error(path=str(path), operation="read", reason=str(e)) from e

    def commit(self, path: Path, document: ManifestDocument) -> CommittedManifest:
        text = document.to_text()
        try:
            with Path(path).open("w", encoding=self.encoding, newline="") as f:
                f.write(text)
        except OSError as e:
            raise manifest_io_error(path=str(path), operation="write", reason=str(e)) from e
        return CommittedManifest(path=Path(path), text=text, sha256=fingerprint(text))
