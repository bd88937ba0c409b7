# tests/core/config/test_settings.py
"""
Testes da validação de `Settings`.

Nenhum valor inválido deve ser corrigido silenciosamente.
"""

import pytest

try:
    from depprune.core.config.settings import Settings, resolve_settings
    from depprune.core.config.errors import InvalidConfigValueError
    from depprune.core.oracle.types import Polarity
except Exception as e:  # noqa: BLE001
    Settings = None
    resolve_settings = None
    InvalidConfigValueError = None
    Polarity = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings module. Implement:\n"
            "- src/depprune/core/config/settings.py (Settings, resolve_settings)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_resolve_settings_from_defaults(dummy_config):
    _require_imports()

    s = resolve_settings(dummy_config)

    assert s == Settings(
        commands=("cargo check",),
        polarity=Polarity.ALL_FAIL,
        manifest_filename="Cargo.toml",
        exclude=("target",),
        report_path=None,
    )


def test_polarity_and_report_are_read(dummy_config):
    _require_imports()

    dummy_config["check"]["polarity"] = "all_pass"
    dummy_config["report"]["path"] = "out/record.json"

    s = resolve_settings(dummy_config)

    assert s.polarity is Polarity.ALL_PASS
    assert s.report_path == "out/record.json"


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("check", "commands", []),
        ("check", "commands", "cargo check"),
        ("check", "commands", ["cargo check", "  "]),
        ("check", "polarity", "sometimes"),
        ("manifest", "filename", ""),
        ("manifest", "filename", "crates/Cargo.toml"),
        ("walk", "exclude", "target"),
        ("report", "path", 3),
    ],
)
def test_invalid_values_raise(dummy_config, section, key, value):
    _require_imports()

    dummy_config[section][key] = value

    with pytest.raises(InvalidConfigValueError):
        resolve_settings(dummy_config)


def test_section_must_be_mapping(dummy_config):
    _require_imports()

    dummy_config["walk"] = ["target"]

    with pytest.raises(InvalidConfigValueError):
        resolve_settings(dummy_config)
