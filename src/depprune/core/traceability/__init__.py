# src/depprune/core/traceability/__init__.py
"""
Pacote de rastreabilidade do depprune: run record v1.

API pública exposta:
    - RunRecord         → estrutura canônica do record
    - create_record     → criação explícita do record
    - add_event         → registro explícito no Event Log
    - manifest_started  → marca início de processamento de um manifest
    - key_decided       → registra o veredito de uma chave
    - manifest_finished → registra conclusão de um manifest
    - run_finished      → encerra a run com sucesso
    - run_failed        → encerra a run com erro fatal
    - save_record       → persistência em JSON
    - load_record       → restauração determinística

Invariantes:
    - O record inicia com `manifests` e `events` vazios
    - Eventos nunca são reordenados automaticamente
"""

from .record import (
    RunRecord,
    create_record,
    add_event,
    manifest_started,
    key_decided,
    manifest_finished,
    run_finished,
    run_failed,
    save_record,
    load_record,
)

__all__ = [
    "RunRecord",
    "create_record",
    "add_event",
    "manifest_started",
    "key_decided",
    "manifest_finished",
    "run_finished",
    "run_failed",
    "save_record",
    "load_record",
]
