# src/depprune/core/oracle/types.py
"""
Tipos canônicos do oráculo de validade.

Componentes:
    - Polarity        → como os status de saída viram um veredito
    - CheckCommand    → um comando de check já dividido (executável + args)
    - ValidityOracle  → protocolo mínimo consumido por Engine e Orchestrator

Invariantes:
    - Um `CheckCommand` é imutável depois de criado
    - O protocolo não impõe herança, apenas conformidade estrutural
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, Tuple, runtime_checkable


class Polarity(str, Enum):
    """
    Política de interpretação dos status de saída dos comandos de check.

    Valores:
        - ALL_FAIL: o projeto é "válido" quando **todos** os comandos
          terminam com status diferente de zero (default)
        - ALL_PASS: o projeto é "válido" quando **todos** os comandos
          terminam com status zero

    O Engine sempre trata "válido após a remoção" como "dependência inútil";
    a polaridade é o único ponto em que o sentido do veredito muda.
    """
    ALL_FAIL = "all_fail"
    ALL_PASS = "all_pass"


@dataclass(frozen=True)
class CheckCommand:
    """Comando de check: executável e lista de argumentos."""

    executable: str
    args: Tuple[str, ...] = ()

    def argv(self) -> List[str]:
        return [self.executable, *self.args]

    def display(self) -> str:
        return " ".join(self.argv())


@runtime_checkable
class ValidityOracle(Protocol):
    """
    Contrato do oráculo de validade.

    Responde "o projeto está aceitável agora?" observando exclusivamente
    o estado em disco. Falhas de infraestrutura (ex.: executável ausente)
    são levantadas como exceção, nunca convertidas em veredito.
    """

    def is_valid(self) -> bool:
        ...
