# tests/core/config/test_loader.py
"""
Testes do loader canônico de configuração.

Os testes asseguram que:
- o `defaults.yaml` empacotado é carregado quando nenhum caminho é informado
- um arquivo local sobrescreve os defaults via deep-merge
- overrides de linha de comando têm a maior precedência
- listas são substituídas, não concatenadas (comando default some)
- erros estruturais são explícitos

Limites explícitos:
    - Não valida a semântica das chaves (ver test_settings.py)
"""

import json

import pytest

try:
    from depprune.core.config.loader import load_config
    from depprune.core.config.errors import (
        ConfigNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    ConfigNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader modules. Implement:\n"
            "- src/depprune/core/config/loader.py (load_config)\n"
            "- src/depprune/core/config/errors.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_packaged_defaults_are_loaded():
    """Sem argumentos, a configuração efetiva é a empacotada."""
    _require_imports()

    cfg = load_config()

    assert cfg["check"]["commands"] == ["cargo check"]
    assert cfg["check"]["polarity"] == "all_fail"
    assert cfg["manifest"]["filename"] == "Cargo.toml"
    assert cfg["walk"]["exclude"] == ["target"]
    assert cfg["report"]["path"] is None


def test_local_yaml_overrides_defaults(tmp_path):
    """O arquivo local mescla por chave e preserva o que não sobrescreve."""
    _require_imports()

    local = tmp_path / "depprune.yaml"
    local.write_text("check:\n  polarity: all_pass\n", encoding="utf-8")

    cfg = load_config(local_path=str(local))

    assert cfg["check"]["polarity"] == "all_pass"
    assert cfg["check"]["commands"] == ["cargo check"]


def test_local_json_is_supported(tmp_path):
    _require_imports()

    local = tmp_path / "depprune.json"
    local.write_text(json.dumps({"walk": {"exclude": ["target", "vendor"]}}), encoding="utf-8")

    cfg = load_config(local_path=str(local))

    assert cfg["walk"]["exclude"] == ["target", "vendor"]


def test_overrides_replace_command_list(tmp_path):
    """Comandos vindos da linha de comando substituem o default inteiro."""
    _require_imports()

    local = tmp_path / "depprune.yaml"
    local.write_text("check:\n  commands: [cargo build]\n", encoding="utf-8")

    cfg = load_config(
        local_path=str(local),
        overrides={"check": {"commands": ["cargo test", "cargo clippy"]}},
    )

    assert cfg["check"]["commands"] == ["cargo test", "cargo clippy"]


def test_missing_local_file_is_ignored(tmp_path):
    _require_imports()

    cfg = load_config(local_path=str(tmp_path / "absent.yaml"))

    assert cfg["check"]["commands"] == ["cargo check"]


def test_missing_defaults_raises(tmp_path):
    _require_imports()

    with pytest.raises(ConfigNotFoundError):
        load_config(defaults_path=str(tmp_path / "nope.yaml"))


def test_unsupported_format_raises(tmp_path):
    _require_imports()

    bad = tmp_path / "defaults.toml"
    bad.write_text("x = 1\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(bad))


def test_root_must_be_mapping(tmp_path):
    _require_imports()

    bad = tmp_path / "defaults.yaml"
    bad.write_text("- cargo check\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(bad))


def test_empty_local_file_is_empty_mapping(tmp_path):
    _require_imports()

    local = tmp_path / "empty.yaml"
    local.write_text("", encoding="utf-8")

    assert load_config(local_path=str(local)) == load_config()
