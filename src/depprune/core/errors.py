"""
depprune: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do depprune.
Erros fazem parte do contrato operacional da ferramenta e devem ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma falha é reinterpretada como veredito do oráculo.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from depprune.core.exceptions import (
    DependenciesNotATableError,
    InitialInvalidProjectError,
    ManifestIOError,
    ManifestParseError,
    OracleSpawnError,
    PruneException,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PruneErrorPayload:
    """
    Payload canônico de erro do depprune.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Oráculo
ORACLE_SPAWN_ERROR = "ORACLE_SPAWN_ERROR"

# Manifest
MANIFEST_IO_ERROR = "MANIFEST_IO_ERROR"
MANIFEST_PARSE_ERROR = "MANIFEST_PARSE_ERROR"
DEPENDENCIES_NOT_A_TABLE = "DEPENDENCIES_NOT_A_TABLE"

# Orchestrator
PROJECT_INITIALLY_INVALID = "PROJECT_INITIALLY_INVALID"

# Configuração / Execução
CONFIG_ERROR = "CONFIG_ERROR"
UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


_TYPE_BY_EXCEPTION = (
    # subclasses antes das bases
    (DependenciesNotATableError, DEPENDENCIES_NOT_A_TABLE),
    (ManifestParseError, MANIFEST_PARSE_ERROR),
    (ManifestIOError, MANIFEST_IO_ERROR),
    (OracleSpawnError, ORACLE_SPAWN_ERROR),
    (InitialInvalidProjectError, PROJECT_INITIALLY_INVALID),
)


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def oracle_spawn_error(
    *,
    command: List[str],
    reason: str,
    hint: str = "Verifique se o executável existe no PATH e tem permissão de execução.",
) -> OracleSpawnError:
    return OracleSpawnError(
        message=f"Não foi possível executar o comando de check: {command[0]}",
        details={"command": list(command), "reason": reason},
        hint=hint,
    )


def manifest_io_error(
    *,
    path: str,
    operation: str,
    reason: str,
    hint: str = "Verifique permissões e espaço em disco do manifest indicado.",
) -> ManifestIOError:
    return ManifestIOError(
        message=f"Falha de I/O ({operation}) no manifest {path}",
        details={"path": path, "operation": operation, "reason": reason},
        hint=hint,
    )


def manifest_parse_error(
    *,
    path: Optional[str],
    reason: str,
    hint: str = "Corrija a sintaxe TOML do manifest antes de reexecutar.",
) -> ManifestParseError:
    return ManifestParseError(
        message=f"Manifest com TOML inválido: {path or '<texto>'}",
        details={"path": path, "reason": reason},
        hint=hint,
    )


def dependencies_not_a_table(
    *,
    path: Optional[str],
    actual_type: str,
    hint: str = "Declare as dependências como tabela `[dependencies]` (não inline nem fragmentada).",
) -> DependenciesNotATableError:
    return DependenciesNotATableError(
        message="A seção `dependencies` deve ser uma tabela",
        details={"path": path, "actual_type": actual_type},
        hint=hint,
    )


def initial_invalid_project(
    *,
    root: str,
    commands: List[str],
    polarity: str,
    hint: str = "O projeto precisa passar no check antes da poda de dependências.",
) -> InitialInvalidProjectError:
    return InitialInvalidProjectError(
        message="Project must compile properly before pruning dependencies!",
        details={"root": root, "commands": list(commands), "polarity": polarity},
        hint=hint,
    )


# ---------------------------------------------------------------------------
# Conversão exceção -> payload
# ---------------------------------------------------------------------------

def exception_to_error(exc: BaseException) -> PruneErrorPayload:
    """Converte exceções em PruneErrorPayload (serializável, acionável).

    Regras:
    - PruneException: já vem com message/details/hint; o código vem do catálogo.
    - ConfigError: código CONFIG_ERROR com o nome da classe em details.
    - Outras exceções: UNEXPECTED_ERROR sem expor stack trace.
    """
    # import tardio: config -> oracle -> errors formaria ciclo no import do módulo
    from depprune.core.config.errors import ConfigError

    if isinstance(exc, PruneException):
        code = exc.__class__.__name__
        for exc_type, mapped in _TYPE_BY_EXCEPTION:
            if isinstance(exc, exc_type):
                code = mapped
                break
        return PruneErrorPayload(
            type=code,
            message=exc.message or "Erro de execução",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    if isinstance(exc, ConfigError):
        return PruneErrorPayload(
            type=CONFIG_ERROR,
            message=str(exc) or "Configuração inválida",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise o arquivo de configuração e as opções de linha de comando.",
        )

    return PruneErrorPayload(
        type=UNEXPECTED_ERROR,
        message=str(exc) or "Erro inesperado durante execução",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o manifest em processamento; ele reflete a última escrita.",
    )
