# src/depprune/core/config/__init__.py

"""
Camada de configuração do depprune.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar e identificar a configuração de uma execução.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + override local)
    - Resolução da configuração final via deep-merge determinístico
    - Validação das chaves consumidas (`Settings`)
    - Geração de hash canônico para o run record

Invariantes:
    - A configuração final é um dicionário puro (dict) até virar `Settings`
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não executa comandos de check
    - Não toca em manifests
"""

from .loader import DEFAULTS_PATH, load_config
from .merge import deep_merge
from .hashing import compute_config_hash
from .settings import Settings, resolve_settings

__all__ = [
    "DEFAULTS_PATH",
    "load_config",
    "deep_merge",
    "compute_config_hash",
    "Settings",
    "resolve_settings",
]
