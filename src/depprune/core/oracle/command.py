# src/depprune/core/oracle/command.py
"""
Oráculo de validade baseado em comandos externos.

Cada comando configurado (ex.: `cargo check`) é dividido uma única vez,
na criação do oráculo, em executável e argumentos. A cada consulta todos
os comandos são executados em sequência como processos filhos:

    - stdin e stdout herdados
    - stderr descartado
    - apenas o status de saída é inspecionado

Política de veredito (ver `Polarity`):
    - ALL_FAIL (default): válido se todos os comandos falham (status != 0)
    - ALL_PASS: válido se todos os comandos passam (status == 0)

A avaliação para no primeiro comando que decide o veredito.

Falhas de spawn (executável ausente, sem permissão) levantam
`OracleSpawnError` e abortam a run inteira. Não há timeout.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from depprune.core.errors import oracle_spawn_error
from depprune.core.run_context import RunContext

from .types import CheckCommand, Polarity


ORACLE_SCOPE = "oracle"


def parse_command(raw: str) -> CheckCommand:
    """Divide `"<executável> <args>"` em `CheckCommand`.

    A divisão é feita no primeiro espaço simples; o restante é dividido em
    cada espaço simples, preservando strings vazias geradas por espaços
    repetidos. Não há suporte a aspas.
    """
    executable, sep, rest = raw.partition(" ")
    if not sep:
        return CheckCommand(executable=raw)
    return CheckCommand(executable=executable, args=tuple(rest.split(" ")))


def parse_commands(raw_commands: Iterable[str]) -> Tuple[CheckCommand, ...]:
    return tuple(parse_command(raw) for raw in raw_commands)


class CommandOracle:
    """Oráculo canônico: executa os comandos de check e aplica a polaridade."""

    def __init__(
        self,
        *,
        commands: Sequence[Union[str, CheckCommand]],
        polarity: Polarity = Polarity.ALL_FAIL,
        cwd: Optional[Path] = None,
        ctx: Optional[RunContext] = None,
    ):
        parsed: List[CheckCommand] = []
        for cmd in commands:
            parsed.append(cmd if isinstance(cmd, CheckCommand) else parse_command(cmd))
        if not parsed:
            raise ValueError("CommandOracle requires at least one check command")

        self.commands: Tuple[CheckCommand, ...] = tuple(parsed)
        self.polarity: Polarity = Polarity(polarity)
        self.cwd: Optional[Path] = cwd
        self.ctx: Optional[RunContext] = ctx

    def _run(self, command: CheckCommand) -> int:
        argv = command.argv()
        try:
            completed = subprocess.run(
                argv,
                cwd=str(self.cwd) if self.cwd is not None else None,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            raise oracle_spawn_error(command=argv, reason=str(e)) from e

        if self.ctx is not None:
            self.ctx.log(
                scope=ORACLE_SCOPE,
                level="debug",
                message="check command finished",
                command=command.display(),
                returncode=completed.returncode,
            )
        return completed.returncode

    def is_valid(self) -> bool:
        expect_success = self.polarity is Polarity.ALL_PASS
        for command in self.commands:
            succeeded = self._run(command) == 0
            if succeeded != expect_success:
                return False
        return True
