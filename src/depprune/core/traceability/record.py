# src/depprune/core/traceability/record.py
"""
Run record v1: rastreabilidade de execuções do depprune.

Este módulo define a estrutura e as operações canônicas do run record,
o artefato JSON que registra o que uma execução fez em cada manifest.

O run record consolida:
    - metadados da execução (run_id, started_at, versão, raiz)
    - entradas (hash da configuração, comandos de check, polaridade)
    - estado incremental de cada manifest processado
    - Event Log ordenado de eventos explícitos

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - A ordem do Event Log reflete a ordem real de execução
    - O record é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico (chaves ordenadas)
    - Manifests são indexados pelo caminho como string

Limites explícitos:
    - Não executa a poda
    - Não decide políticas de execução
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """
    Normaliza um timestamp para timezone-aware em UTC.

    Timestamps timezone-naive são assumidos como UTC; os demais são
    convertidos para UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


def _ms_between(start: datetime, end: datetime) -> int:
    """Duração em milissegundos entre dois timestamps (nunca negativa)."""
    s = _ensure_tzaware_utc(start)
    e = _ensure_tzaware_utc(end)
    return max(0, int((e - s).total_seconds() * 1000))


@dataclass
class RunRecord:
    """
    Run record v1: registro de uma execução do depprune.

    Campos principais:
        - run: metadados da execução (run_id, started_at, depprune_version, root)
        - inputs: config_hash, commands, polarity
        - manifests: estado incremental de cada manifest, indexado pelo caminho
        - events: Event Log ordenado

    Invariantes:
        - `manifests` é sempre um dicionário indexado por caminho
        - `events` é sempre uma lista ordenada
        - A estrutura completa é serializável em JSON
    """

    run: Dict[str, Any]
    inputs: Dict[str, Any]
    manifests: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Converte o record para um dicionário independente do estado interno.

        Returns:
            Dict[str, Any]: Representação serializável do record.
        """
        return {
            "run": dict(self.run),
            "inputs": dict(self.inputs),
            "manifests": {k: dict(v) for k, v in self.manifests.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunRecord":
        """Reconstrói um record a partir de `to_dict` (campos ausentes viram vazios)."""
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            manifests={k: dict(v) for k, v in (data.get("manifests", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )


def create_record(
    *,
    run_id: str,
    started_at: datetime,
    version: str,
    root: str,
    config_hash: str,
    commands: Sequence[str],
    polarity: str,
) -> RunRecord:
    """
    Cria o record inicial de uma execução.

    ⚠️ Esta função **não emite eventos implicitamente**: o Event Log inicia
    vazio.

    Args:
        run_id (str): Identificador único da execução.
        started_at (datetime): Timestamp de início.
        version (str): Versão do depprune.
        root (str): Raiz da árvore percorrida.
        config_hash (str): Hash da configuração efetiva.
        commands (Sequence[str]): Comandos de check como configurados.
        polarity (str): Polaridade do oráculo.

    Returns:
        RunRecord: Instância inicializada.
    """
    return RunRecord(
        run={
            "run_id": run_id,
            "started_at": _iso(started_at),
            "depprune_version": version,
            "root": root,
        },
        inputs={
            "config_hash": config_hash,
            "commands": list(commands),
            "polarity": polarity,
        },
        manifests={},
        events=[],
    )


def add_event(
    record: RunRecord,
    *,
    event_type: str,
    ts: datetime,
    path: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Adiciona um evento explícito ao Event Log.

    Invariantes:
        - Cada chamada adiciona exatamente um evento
        - Eventos não são reordenados nem deduplicados
    """
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if path is not None:
        ev["path"] = path
    if payload is not None:
        ev["payload"] = payload
    record.events.append(ev)


def manifest_started(record: RunRecord, *, path: str, ts: datetime) -> None:
    """Marca o início do processamento de um manifest (`status = running`)."""
    record.manifests.setdefault(path, {})
    record.manifests[path].update(
        {
            "path": path,
            "status": "running",
            "started_at": _iso(ts),
            "decisions": [],
        }
    )
    add_event(record, event_type="manifest_started", ts=ts, path=path)


def key_decided(record: RunRecord, *, path: str, key: str, verdict: str, ts: datetime) -> None:
    """Registra o veredito de uma chave no manifest correspondente."""
    state = record.manifests.setdefault(path, {"path": path, "decisions": []})
    state.setdefault("decisions", []).append({"key": key, "verdict": verdict})
    add_event(record, event_type="key_decided", ts=ts, path=path, payload={"key": key, "verdict": verdict})


def manifest_finished(record: RunRecord, *, path: str, ts: datetime, result: Dict[str, Any]) -> None:
    """
    Registra a conclusão do processamento de um manifest.

    Campos consumidos de `result` (se presentes): status, summary, writes.
    A duração é calculada a partir de `started_at`, quando registrado.
    """
    state = record.manifests.setdefault(path, {"path": path, "decisions": []})
    state.update(
        {
            "status": result.get("status", "unchanged"),
            "summary": result.get("summary", ""),
            "writes": int(result.get("writes", 0)),
            "finished_at": _iso(ts),
        }
    )

    started_at = state.get("started_at")
    if isinstance(started_at, str):
        state["duration_ms"] = _ms_between(datetime.fromisoformat(started_at), ts)

    add_event(
        record,
        event_type="manifest_finished",
        ts=ts,
        path=path,
        payload={"status": state["status"], "writes": state["writes"]},
    )


def run_finished(record: RunRecord, *, ts: datetime, removed: int) -> None:
    record.run["status"] = "completed"
    record.run["finished_at"] = _iso(ts)
    add_event(record, event_type="run_finished", ts=ts, payload={"removed": removed})


def run_failed(record: RunRecord, *, ts: datetime, error: Dict[str, Any]) -> None:
    """Registra a falha fatal da run; manifests em andamento ficam `failed`."""
    record.run["status"] = "failed"
    record.run["finished_at"] = _iso(ts)
    record.run["error"] = dict(error)
    for state in record.manifests.values():
        if state.get("status") == "running":
            state["status"] = "failed"
    add_event(record, event_type="run_failed", ts=ts, payload={"error": dict(error)})


def save_record(record: RunRecord, path: Path) -> None:
    """
    Persiste o record em JSON (indentado, chaves ordenadas).

    Raises:
        OSError: Em caso de falha ao criar diretórios ou escrever o arquivo.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(record.to_dict(), ensure_ascii=False, indent=2, sort_keys=True), encoding="utf-8")


def load_record(path: Path) -> RunRecord:
    """
    Carrega um record persistido.

    Raises:
        OSError: Em caso de falha de leitura do arquivo.
        json.JSONDecodeError: Em caso de JSON inválido.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return RunRecord.from_dict(data)
