# src/depprune/core/config/settings.py
"""
Settings tipados a partir da configuração resolvida.

O loader devolve um `dict` puro; este módulo valida as chaves que o
depprune efetivamente consome e as congela em `Settings`, que é o único
objeto de configuração visto por Oráculo, Engine e Orchestrator.

Chaves consumidas (v1):
    - check.commands   → lista não vazia de strings não vazias
    - check.polarity   → `all_fail` | `all_pass`
    - manifest.filename → nome exato do arquivo de manifest
    - walk.exclude     → diretórios (relativos à raiz) nunca visitados
    - report.path      → caminho opcional do run record em JSON

Invariantes:
    - `Settings` é imutável depois de criado
    - Nenhum valor inválido é corrigido silenciosamente
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from depprune.core.oracle.types import Polarity

from .errors import InvalidConfigValueError


@dataclass(frozen=True)
class Settings:
    """Configuração efetiva e validada de uma execução."""

    commands: Tuple[str, ...]
    polarity: Polarity
    manifest_filename: str
    exclude: Tuple[str, ...]
    report_path: Optional[str] = None


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidConfigValueError(f"Seção '{name}' deve ser um mapa, recebido: {type(value).__name__}")
    return value


def _string_list(value: Any, *, key: str, allow_empty: bool) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise InvalidConfigValueError(f"'{key}' deve ser uma lista, recebido: {type(value).__name__}")
    if not allow_empty and not value:
        raise InvalidConfigValueError(f"'{key}' não pode ser vazio")
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise InvalidConfigValueError(f"'{key}' deve conter apenas strings não vazias: {item!r}")
    return tuple(value)


def resolve_settings(config: Dict[str, Any]) -> Settings:
    """
    Valida a configuração resolvida e produz `Settings`.

    Args:
        config (Dict[str, Any]): Configuração efetiva (saída de `load_config`).

    Returns:
        Settings: Configuração tipada e imutável.

    Raises:
        InvalidConfigValueError: Se alguma chave consumida tiver valor inválido.
    """
    check = _section(config, "check")
    manifest = _section(config, "manifest")
    walk = _section(config, "walk")
    report = _section(config, "report")

    commands = _string_list(check.get("commands"), key="check.commands", allow_empty=False)

    raw_polarity = check.get("polarity", Polarity.ALL_FAIL.value)
    try:
        polarity = Polarity(raw_polarity)
    except ValueError:
        allowed = ", ".join(p.value for p in Polarity)
        raise InvalidConfigValueError(
            f"'check.polarity' inválido: {raw_polarity!r} (permitidos: {allowed})"
        ) from None

    filename = manifest.get("filename")
    if not isinstance(filename, str) or not filename.strip() or "/" in filename:
        raise InvalidConfigValueError(f"'manifest.filename' deve ser um nome de arquivo: {filename!r}")

    exclude = _string_list(walk.get("exclude", []) or [], key="walk.exclude", allow_empty=True)

    report_path = report.get("path")
    if report_path is not None and (not isinstance(report_path, str) or not report_path.strip()):
        raise InvalidConfigValueError(f"'report.path' deve ser string ou null: {report_path!r}")

    return Settings(
        commands=commands,
        polarity=polarity,
        manifest_filename=filename,
        exclude=exclude,
        report_path=report_path,
    )
