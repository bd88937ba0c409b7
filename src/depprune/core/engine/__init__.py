# src/depprune/core/engine/__init__.py
"""
Engine do depprune.

Componentes principais:
    - engine       → `Engine`: remoção por tentativa em um manifest
    - orchestrator → `Orchestrator`: pre-flight + Engine por manifest da árvore
    - walker       → travessia recursiva filtrando diretórios de build
    - types        → vereditos e resultados imutáveis

Princípios fundamentais:
    - Execução estritamente sequencial
    - A lista de chaves é capturada antes de qualquer mutação
    - No máximo um snapshot vivo por vez (um nível de undo)
    - Nenhum erro fatal é isolado por manifest
"""

from .engine import Engine
from .orchestrator import Orchestrator, build_orchestrator
from .types import KeyDecision, KeyVerdict, ManifestResult, ManifestStatus, RunResult
from .walker import iter_files, iter_manifests

__all__ = [
    "Engine",
    "Orchestrator",
    "build_orchestrator",
    "KeyDecision",
    "KeyVerdict",
    "ManifestResult",
    "ManifestStatus",
    "RunResult",
    "iter_files",
    "iter_manifests",
]
