# src/depprune/core/manifest/document.py
"""
Adapter de documento de manifest (TOML) sobre tomlkit.

Este módulo expõe ao Engine apenas o que a remoção por tentativa precisa:

    - parse(text)                  → ManifestDocument
    - dependency_keys()            → chaves da tabela `dependencies`
    - remove_dependency(key)       → remoção de uma chave (no-op se ausente)
    - snapshot_dependencies()      → cópia por valor da tabela inteira
    - restore_dependencies(snap)   → substituição da tabela inteira
    - to_text()                    → serialização preservando formatação

Decisões arquiteturais:
    - tomlkit preserva comentários, ordem e espaçamento das regiões intocadas
    - O snapshot é um deepcopy da tabela; restaurar substitui a tabela toda,
      de modo que a formatação das chaves irmãs volta byte a byte
    - Apenas a tabela de topo `dependencies` é tocada

Limites explícitos:
    - Não resolve versões nem interpreta o conteúdo das dependências
    - `dependencies` inline (`dependencies = { ... }`) ou fragmentada entre
      outras tabelas não é suportada e gera `DependenciesNotATableError`
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional, Tuple

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import Table
from tomlkit.toml_document import TOMLDocument

from depprune.core.errors import dependencies_not_a_table, manifest_parse_error


DEPENDENCIES_SECTION = "dependencies"


@dataclass(frozen=True)
class DependencySnapshot:
    """Cópia por valor da tabela de dependências (um nível de undo)."""

    table: Table
    keys: Tuple[str, ...]

    def copy_table(self) -> Table:
        return deepcopy(self.table)


class ManifestDocument:
    """Documento TOML editável de um manifest."""

    def __init__(self, doc: TOMLDocument, *, path: Optional[str] = None):
        self._doc = doc
        self.path = path
        self._check_section()

    def _check_section(self) -> None:
        if DEPENDENCIES_SECTION not in self._doc:
            return
        item = self._doc.item(DEPENDENCIES_SECTION)
        if not isinstance(item, Table):
            raise dependencies_not_a_table(path=self.path, actual_type=type(item).__name__)

    def _table(self) -> Optional[Table]:
        if DEPENDENCIES_SECTION not in self._doc:
            return None
        return self._doc.item(DEPENDENCIES_SECTION)

    def has_dependencies(self) -> bool:
        return self._table() is not None

    def dependency_keys(self) -> List[str]:
        table = self._table()
        if table is None:
            return []
        return [str(key) for key in table.keys()]

    def remove_dependency(self, key: str) -> None:
        table = self._table()
        if table is None or key not in table:
            return
        table.remove(key)

    def snapshot_dependencies(self) -> DependencySnapshot:
        table = self._table()
        if table is None:
            raise KeyError(DEPENDENCIES_SECTION)
        return DependencySnapshot(table=deepcopy(table), keys=tuple(self.dependency_keys()))

    def restore_dependencies(self, snapshot: DependencySnapshot) -> None:
        # a cópia mantém o snapshot reutilizável após a restauração
        self._doc[DEPENDENCIES_SECTION] = snapshot.copy_table()

    def to_text(self) -> str:
        return tomlkit.dumps(self._doc)


def parse(text: str, *, path: Optional[str] = None) -> ManifestDocument:
    """Faz o parse do texto de um manifest.

    Raises:
        ManifestParseError: Se o texto não for TOML bem formado.
        DependenciesNotATableError: Se `dependencies` existir sem ser tabela.
    """
    try:
        doc = tomlkit.parse(text)
    except TOMLKitError as e:
        raise manifest_parse_error(path=path, reason=str(e)) from e
    return ManifestDocument(doc, path=path)
