# src/depprune/core/engine/types.py
"""
Tipos canônicos de resultado do motor de poda.

Componentes principais:
    - KeyVerdict     → veredito de uma chave (REQUIRED, USELESS)
    - ManifestStatus → estado final de um manifest (PRUNED, UNCHANGED, SKIPPED)
    - KeyDecision    → veredito imutável de uma chave
    - ManifestResult → resultado imutável do processamento de um manifest
    - RunResult      → agregado de uma execução sobre a árvore

Invariantes:
    - Enums possuem valores textuais canônicos (serializáveis em JSON)
    - Resultados são imutáveis (frozen)
    - A ordem de `decisions` é a ordem em que as chaves foram tentadas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List


class KeyVerdict(str, Enum):
    """
    Veredito de uma tentativa de remoção.

    - REQUIRED: o oráculo não aceitou a remoção; a tabela foi restaurada
    - USELESS: o oráculo aceitou a remoção; a chave permanece removida
    """
    REQUIRED = "required"
    USELESS = "useless"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ManifestStatus(str, Enum):
    """
    Estado final de um manifest após o processamento.

    - PRUNED: ao menos uma dependência foi removida
    - UNCHANGED: todas as dependências foram mantidas
    - SKIPPED: não há tabela `dependencies`; o arquivo não foi tocado
    """
    PRUNED = "pruned"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class KeyDecision:
    key: str
    verdict: KeyVerdict


@dataclass(frozen=True)
class ManifestResult:
    """
    Resultado imutável do processamento de um manifest.

    Campos:
        - path: caminho do manifest
        - status: estado final (`ManifestStatus`)
        - decisions: vereditos na ordem de tentativa
        - summary: resumo textual
        - writes: quantidade de escritas realizadas no arquivo
    """
    path: Path
    status: ManifestStatus
    summary: str
    decisions: List[KeyDecision] = field(default_factory=list)
    writes: int = 0

    def keys_with(self, verdict: KeyVerdict) -> List[str]:
        return [d.key for d in self.decisions if d.verdict is verdict]

    @property
    def removed(self) -> List[str]:
        return self.keys_with(KeyVerdict.USELESS)

    @property
    def kept(self) -> List[str]:
        return self.keys_with(KeyVerdict.REQUIRED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "status": self.status.value,
            "summary": self.summary,
            "writes": self.writes,
            "decisions": [{"key": d.key, "verdict": d.verdict.value} for d in self.decisions],
        }


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução sobre a árvore."""

    manifests: List[ManifestResult] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return sum(len(m.removed) for m in self.manifests)
