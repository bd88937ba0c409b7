# src/depprune/core/run_context.py
"""
RunContext: Contexto canônico de execução do depprune.

Este módulo define o **RunContext**, a estrutura compartilhada passada a
Oráculo, Engine e Orchestrator durante uma execução.

O RunContext é o **único meio** de:
- registro de logs estruturados de execução (Event Log em memória)
- emissão das linhas de diagnóstico legíveis (stderr na CLI)
- coleta de warnings não fatais associados a um escopo (ex.: um manifest)

Princípios fundamentais:
- Isolamento por execução (cada run possui seu próprio contexto)
- Diagnósticos humanos não são interface estável; os eventos estruturados são
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TextIO


@dataclass
class RunContext:
    """
    Contexto de execução compartilhado de uma run.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local + linha de comando)
    - meta: metadados de execução (ex.: root, versão)
    - stream: destino das linhas de diagnóstico (None = silencioso)
    - events: log estruturado de eventos
    - warnings: warnings por escopo
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)
    stream: Optional[TextIO] = field(default=None, repr=False)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(
        self,
        *,
        scope: str,
        level: str,
        message: str,
        display: Optional[str] = None,
        **extra: Any,
    ) -> None:
        """Registra um evento estruturado.

        Quando `display` é informado e há `stream`, a linha é escrita nele
        (uma linha por chamada, com flush para intercalar com a saída dos
        comandos de check).
        """
        event = {
            "run_id": self.run_id,
            "scope": scope,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        if display is not None and self.stream is not None:
            self.stream.write(display + "\n")
            self.stream.flush()

    def add_warning(self, *, scope: str, message: str) -> None:
        if scope not in self.warnings:
            self.warnings[scope] = []
        self.warnings[scope].append(message)
