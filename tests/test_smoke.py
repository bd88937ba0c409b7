# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do depprune.

Garantem apenas que o pacote importa e que os defaults empacotados
estão presentes. Não validam comportamento de domínio.
"""


def test_package_imports():
    import depprune

    assert isinstance(depprune.__version__, str)


def test_packaged_defaults_exist():
    from depprune.core.config import DEFAULTS_PATH

    assert DEFAULTS_PATH.name == "defaults.yaml"
    assert DEFAULTS_PATH.exists()
