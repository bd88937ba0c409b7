
"""
depprune: Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do depprune.

Objetivo:
- Permitir que Engine, Oráculo e Orchestrator levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para PruneErrorPayload
- Evitar OSError/ValueError genéricos nas fronteiras críticas

Regras:
- Toda exceção aqui é fatal para a run inteira (não há isolamento por manifest).
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PruneException(Exception):
    """Base class para exceções internas do depprune.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Oráculo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OracleSpawnError(PruneException):
    """Um comando de check configurado não pôde ser iniciado."""


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ManifestIOError(PruneException):
    """Falha de leitura ou escrita de um arquivo de manifest."""


@dataclass(frozen=True)
class ManifestParseError(PruneException):
    """O texto do manifest não é TOML bem formado."""


@dataclass(frozen=True)
class DependenciesNotATableError(ManifestParseError):
    """A entrada `dependencies` existe, mas não é uma tabela editável."""


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InitialInvalidProjectError(PruneException):
    """O projeto não passa no oráculo antes de qualquer mutação."""
