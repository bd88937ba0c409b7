# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- `None` sobrescreve escalares, mas não estruturas
- conflitos de tipo são rejeitados explicitamente
- objetos de entrada não são mutados
"""

import pytest

try:
    from depprune.core.config.merge import deep_merge
    from depprune.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Falha explicitamente quando `deep_merge` e/ou `ConfigTypeConflictError`
    não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/depprune/core/config/merge.py (deep_merge)\n"
            "- src/depprune/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override_does_not_mutate_inputs():
    _require_imports()

    base = {"check": {"polarity": "all_fail"}, "manifest": {"filename": "Cargo.toml"}}
    override = {"check": {"polarity": "all_pass"}}

    out = deep_merge(base, override)

    assert out == {"check": {"polarity": "all_pass"}, "manifest": {"filename": "Cargo.toml"}}
    assert base["check"]["polarity"] == "all_fail"
    assert override == {"check": {"polarity": "all_pass"}}


def test_merge_lists_are_replaced():
    _require_imports()

    out = deep_merge({"check": {"commands": ["cargo check"]}}, {"check": {"commands": ["make"]}})

    assert out == {"check": {"commands": ["make"]}}


def test_merge_none_overrides_scalar_both_ways():
    _require_imports()

    assert deep_merge({"report": {"path": "a.json"}}, {"report": {"path": None}}) == {"report": {"path": None}}
    assert deep_merge({"report": {"path": None}}, {"report": {"path": "a.json"}}) == {"report": {"path": "a.json"}}


def test_merge_new_keys_are_added():
    _require_imports()

    out = deep_merge({"check": {}}, {"walk": {"exclude": ["target"]}})

    assert out == {"check": {}, "walk": {"exclude": ["target"]}}


@pytest.mark.parametrize(
    "base, override",
    [
        ({"check": {"polarity": "all_fail"}}, {"check": "cargo test"}),
        ({"walk": {"exclude": ["target"]}}, {"walk": {"exclude": "target"}}),
        ({"walk": {"exclude": ["target"]}}, {"walk": {"exclude": None}}),
    ],
)
def test_merge_type_conflict_raises(base, override):
    _require_imports()

    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)
