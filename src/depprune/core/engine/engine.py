# src/depprune/core/engine/engine.py
"""
Motor de remoção por tentativa (um manifest por vez).

Algoritmo por manifest:
1. Ler o texto do manifest (`ManifestIOError` em falha).
2. Fazer o parse (`ManifestParseError`; propaga e aborta a run).
3. Sem tabela `dependencies`: o arquivo não é tocado (status SKIPPED).
4. Capturar a lista de chaves uma única vez, antes de qualquer mutação.
5. Para cada chave, na ordem de inserção:
   a. snapshot da tabela inteira
   b. remoção da chave em memória
   c. commit em disco (o oráculo observa o disco, não a memória)
   d. consulta ao oráculo
   e. válido → a chave permanece removida (USELESS)
   f. inválido → restaura a tabela a partir do snapshot (REQUIRED); o disco
      só volta a refletir a chave na próxima escrita
6. Commit final do estado em memória.

O arquivo é escrito N + 1 vezes para N chaves. Nenhuma falha é isolada:
qualquer exceção propaga até o Orchestrator.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from depprune.core.manifest.document import parse
from depprune.core.manifest.store import FileSystemStore, ManifestStore
from depprune.core.oracle.types import ValidityOracle
from depprune.core.run_context import RunContext
from depprune.core.traceability.record import (
    RunRecord,
    key_decided,
    manifest_finished,
    manifest_started,
)

from .types import KeyDecision, KeyVerdict, ManifestResult, ManifestStatus


ENGINE_SCOPE = "engine"


class Engine:
    """Motor canônico de poda: remover → persistir → validar → manter ou restaurar."""

    def __init__(
        self,
        *,
        oracle: ValidityOracle,
        ctx: RunContext,
        store: Optional[ManifestStore] = None,
        record: Optional[RunRecord] = None,
    ):
        self.oracle: ValidityOracle = oracle
        self.ctx: RunContext = ctx
        self.store: ManifestStore = store if store is not None else FileSystemStore()
        self.record: Optional[RunRecord] = record

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _decide(self, path: Path, key: str, verdict: KeyVerdict) -> KeyDecision:
        self.ctx.log(
            scope=str(path),
            level="info",
            message="key decided",
            display=f"  > {verdict.label}: {json.dumps(key, ensure_ascii=False)}",
            key=key,
            verdict=verdict.value,
        )
        if self.record is not None:
            key_decided(self.record, path=str(path), key=key, verdict=verdict.value, ts=self._now())
        return KeyDecision(key=key, verdict=verdict)

    def _finish(self, result: ManifestResult) -> ManifestResult:
        self.ctx.log(
            scope=str(result.path),
            level="info",
            message="manifest finished",
            status=result.status.value,
            removed=result.removed,
            writes=result.writes,
        )
        if self.record is not None:
            manifest_finished(self.record, path=str(result.path), ts=self._now(), result=result.to_dict())
        return result

    def process(self, path: Union[str, Path]) -> ManifestResult:
        path = Path(path)
        self.ctx.log(
            scope=ENGINE_SCOPE,
            level="info",
            message="working on manifest",
            display=f">>> Working on {path}",
            path=str(path),
        )
        if self.record is not None:
            manifest_started(self.record, path=str(path), ts=self._now())

        text = self.store.read(path)
        document = parse(text, path=str(path))

        if not document.has_dependencies():
            return self._finish(
                ManifestResult(path=path, status=ManifestStatus.SKIPPED, summary="no dependencies table")
            )

        keys = document.dependency_keys()
        if not keys:
            self.ctx.add_warning(scope=str(path), message="dependencies table is empty")

        decisions: List[KeyDecision] = []
        writes = 0
        for key in keys:
            snapshot = document.snapshot_dependencies()
            document.remove_dependency(key)

            self.store.commit(path, document)
            writes += 1

            if self.oracle.is_valid():
                verdict = KeyVerdict.USELESS
            else:
                document.restore_dependencies(snapshot)
                verdict = KeyVerdict.REQUIRED
            decisions.append(self._decide(path, key, verdict))

        self.store.commit(path, document)
        writes += 1

        removed = sum(1 for d in decisions if d.verdict is KeyVerdict.USELESS)
        return self._finish(
            ManifestResult(
                path=path,
                status=ManifestStatus.PRUNED if removed else ManifestStatus.UNCHANGED,
                summary=f"{removed} removed, {len(decisions) - removed} kept",
                decisions=decisions,
                writes=writes,
            )
        )
