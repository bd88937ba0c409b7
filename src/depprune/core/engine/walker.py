# src/depprune/core/engine/walker.py
"""
Travessia recursiva da árvore de diretórios em busca de manifests.

Decisões arquiteturais:
    - A ordem é a ordem de enumeração do sistema operacional (sem ordenação);
      manifests são independentes entre si, então a ordem global não importa
    - Diretórios excluídos são comparados por prefixo de caminho relativo à
      raiz (`target` exclui `target/**`, mas não `crates/x/target/**`)
    - Links simbólicos para diretórios não são seguidos (evita ciclos)
    - A travessia é preguiçosa (gerador): um diretório só é listado
      quando alcançado

Limites explícitos:
    - Não lê conteúdo de arquivos
    - Não decide o que fazer com cada manifest
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from depprune.core.errors import manifest_io_error


def _exclusions(exclude: Iterable[str]) -> List[Tuple[str, ...]]:
    out: List[Tuple[str, ...]] = []
    for raw in exclude:
        parts = tuple(p for p in Path(raw).parts if p not in (".", ""))
        if parts:
            out.append(parts)
    return out


def _is_excluded(rel: Path, exclusions: List[Tuple[str, ...]]) -> bool:
    parts = rel.parts
    return any(parts[: len(ex)] == ex for ex in exclusions)


def iter_files(root: Path, *, exclude: Iterable[str] = ()) -> Iterator[Path]:
    """Percorre `root` recursivamente e produz todo arquivo não excluído."""
    root = Path(root)
    exclusions = _exclusions(exclude)
    if not root.is_dir():
        return

    def _visit(directory: Path) -> Iterator[Path]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise manifest_io_error(path=str(directory), operation="scan", reason=str(e)) from e

        for entry in entries:
            path = Path(entry.path)
            if _is_excluded(path.relative_to(root), exclusions):
                continue
            if entry.is_dir(follow_symlinks=False):
                yield from _visit(path)
            elif entry.is_file():
                yield path

    yield from _visit(root)


def iter_manifests(root: Path, *, filename: str, exclude: Iterable[str] = ()) -> Iterator[Path]:
    """Produz os arquivos cujo nome é exatamente `filename`."""
    for path in iter_files(root, exclude=exclude):
        if path.name == filename:
            yield path
