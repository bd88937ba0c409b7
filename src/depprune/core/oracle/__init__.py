# src/depprune/core/oracle/__init__.py
"""
Oráculo de validade do depprune.

Componentes:
    - types   → `Polarity`, `CheckCommand`, protocolo `ValidityOracle`
    - command → `CommandOracle` (comandos externos) e parsing de comandos

Invariantes:
    - Os comandos são fixos durante toda a run
    - Falha de spawn nunca vira veredito
"""

from .types import CheckCommand, Polarity, ValidityOracle
from .command import CommandOracle, parse_command, parse_commands

__all__ = [
    "CheckCommand",
    "Polarity",
    "ValidityOracle",
    "CommandOracle",
    "parse_command",
    "parse_commands",
]
