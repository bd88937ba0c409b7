# tests/conftest.py
"""
Fixtures compartilhados para testes do depprune.

Este módulo define fixtures reutilizáveis que fornecem:
- textos de manifest determinísticos (com comentários e formatação própria)
- contexto de execução controlado (RunContext)
- um oráculo roteirizado que observa o disco, sem executar processos
- um store que conta commits

O objetivo destas fixtures é permitir testes do core (manifest, engine,
orchestrator e traceability) sem depender de `cargo` ou de qualquer
toolchain externa.

Decisões arquiteturais:
    - O oráculo roteirizado lê o manifest **do disco**, como um comando
      de check real faria; se o Engine consultar antes de persistir, os
      testes falham
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Limites explícitos:
    - Não substituir os testes de `CommandOracle` com processos reais
    - Não conter lógica de domínio
"""

import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List

import pytest
import tomlkit


# =====================================================
# Manifests
# =====================================================

@pytest.fixture
def cargo_manifest_text() -> str:
    """
    Manifest com três dependências (`a`, `b`, `c`), comentários e seções
    vizinhas que nunca devem ser tocadas.

    Invariantes:
        - TOML sintaticamente válido
        - Ordem de inserção das dependências: a, b, c
    """
    return (
        "# workspace member\n"
        "[package]\n"
        'name = "demo"\n'
        'version = "0.1.0"\n'
        "\n"
        "[dependencies]\n"
        'a = "1.0"  # pinned\n'
        'b = { version = "2", features = ["x"] }\n'
        'c = "3"\n'
        "\n"
        "[dev-dependencies]\n"
        'a = "1.0"\n'
    )


@pytest.fixture
def write_manifest():
    """
    Retorna uma função que grava um manifest em `<dir>/Cargo.toml`
    (criando diretórios) e devolve o caminho.
    """

    def _write(directory: Path, text: str, filename: str = "Cargo.toml") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


def dependency_keys_on_disk(path: Path) -> List[str]:
    """Chaves de `[dependencies]` como estão em disco neste instante."""
    doc = tomlkit.parse(Path(path).read_text(encoding="utf-8"))
    deps = doc.get("dependencies")
    return [] if deps is None else [str(k) for k in deps.keys()]


@pytest.fixture
def keys_on_disk():
    return dependency_keys_on_disk


# =====================================================
# RunContext
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima já resolvida, no formato do `defaults.yaml`.

    Returns:
        dict: Configuração determinística para testes.
    """
    return {
        "check": {"commands": ["cargo check"], "polarity": "all_fail"},
        "manifest": {"filename": "Cargo.toml"},
        "walk": {"exclude": ["target"]},
        "report": {"path": None},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico e silencioso (sem stream).

    Invariantes:
        - run_id fixo
        - created_at fixo em UTC
    """
    from depprune.core.run_context import RunContext

    return RunContext(
        run_id="test-run",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"root": "."},
    )


@pytest.fixture
def streaming_ctx(dummy_config):
    """RunContext cujas linhas de diagnóstico vão para um `io.StringIO`."""
    from depprune.core.run_context import RunContext

    return RunContext(
        run_id="test-run",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        config=dummy_config,
        stream=io.StringIO(),
    )


# =====================================================
# Oráculo e store de teste
# =====================================================

class ScriptedOracle:
    """
    Oráculo que considera o projeto válido quando todo manifest observado
    ainda declara suas dependências obrigatórias.

    Implementa `ValidityOracle` via duck typing. Cada consulta lê os
    manifests do disco e registra as chaves vistas em `seen`.
    """

    def __init__(self, required: Dict[Path, Iterable[str]], *, preflight: bool = True):
        self.required = {Path(p): set(keys) for p, keys in required.items()}
        self.preflight = preflight
        self.calls = 0
        self.seen: List[Dict[Path, List[str]]] = []

    def is_valid(self) -> bool:
        self.calls += 1
        if self.calls == 1 and not self.preflight:
            return False
        snapshot = {p: dependency_keys_on_disk(p) for p in self.required}
        self.seen.append(snapshot)
        return all(keys <= set(snapshot[p]) for p, keys in self.required.items())


class AlwaysValidOracle:
    """Oráculo que aceita qualquer remoção."""

    def __init__(self):
        self.calls = 0

    def is_valid(self) -> bool:
        self.calls += 1
        return True


@pytest.fixture
def scripted_oracle():
    return ScriptedOracle


@pytest.fixture
def always_valid_oracle():
    return AlwaysValidOracle()


@pytest.fixture
def counting_store():
    """
    Store sobre o filesystem que registra cada commit (caminho + texto).
    """
    from depprune.core.manifest.store import FileSystemStore

    class CountingStore(FileSystemStore):
        def __init__(self):
            self.commits = []

        def commit(self, path, document):
            committed = super().commit(path, document)
            self.commits.append(committed)
            return committed

    return CountingStore()
