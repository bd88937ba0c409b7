# src/depprune/core/engine/orchestrator.py
"""
Orquestrador da árvore: pre-flight do oráculo + Engine por manifest.

Fluxo:
    1. Consulta o oráculo uma vez sobre a árvore intocada; se o projeto não
       for válido, aborta com `InitialInvalidProjectError` antes de abrir
       qualquer manifest para escrita
    2. Percorre a árvore (`walker.iter_manifests`), ignorando diretórios de
       saída de build
    3. Processa cada manifest encontrado, em sequência

Invariantes:
    - Nenhum manifest é escrito se o pre-flight falhar
    - Qualquer erro fatal interrompe a run; manifests já processados
      mantêm o estado commitado
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from depprune.core.errors import initial_invalid_project
from depprune.core.oracle.types import ValidityOracle
from depprune.core.run_context import RunContext

from .engine import Engine
from .types import ManifestResult, RunResult
from .walker import iter_manifests


ORCHESTRATOR_SCOPE = "orchestrator"


class Orchestrator:
    """Executa o Engine sobre todos os manifests de uma árvore."""

    def __init__(
        self,
        *,
        oracle: ValidityOracle,
        engine: Engine,
        ctx: RunContext,
        manifest_filename: str = "Cargo.toml",
        exclude: Sequence[str] = ("target",),
    ):
        self.oracle = oracle
        self.engine = engine
        self.ctx = ctx
        self.manifest_filename = manifest_filename
        self.exclude = tuple(exclude)

    def _preflight(self, root: Path) -> None:
        valid = self.oracle.is_valid()
        self.ctx.log(scope=ORCHESTRATOR_SCOPE, level="info", message="preflight", valid=valid)
        if not valid:
            commands = [c.display() for c in getattr(self.oracle, "commands", ())]
            polarity = getattr(self.oracle, "polarity", None)
            raise initial_invalid_project(
                root=str(root),
                commands=commands,
                polarity=getattr(polarity, "value", str(polarity)),
            )

    def run(self, root: Union[str, Path]) -> RunResult:
        root = Path(root)
        self._preflight(root)

        results: List[ManifestResult] = []
        for path in iter_manifests(root, filename=self.manifest_filename, exclude=self.exclude):
            results.append(self.engine.process(path))

        if not results:
            self.ctx.add_warning(
                scope=ORCHESTRATOR_SCOPE,
                message=f"no {self.manifest_filename} found under {root}",
            )
        return RunResult(manifests=results)


def build_orchestrator(
    *,
    oracle: ValidityOracle,
    ctx: RunContext,
    manifest_filename: str = "Cargo.toml",
    exclude: Sequence[str] = ("target",),
    store=None,
    record=None,
) -> Orchestrator:
    """Monta Engine + Orchestrator compartilhando o mesmo oráculo e contexto."""
    engine = Engine(oracle=oracle, ctx=ctx, store=store, record=record)
    return Orchestrator(
        oracle=oracle,
        engine=engine,
        ctx=ctx,
        manifest_filename=manifest_filename,
        exclude=exclude,
    )
