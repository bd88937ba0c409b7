# src/depprune/core/config/errors.py
"""
Exceções canônicas da camada de configuração do depprune.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, a validação estrutural e a resolução de configuração.

As exceções aqui definidas representam **erros do operador** (arquivo
ausente, formato não suportado, valor inválido), e não falhas de
execução do motor de poda.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de oráculo ou de manifest

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de Engine, Oráculo ou CLI
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do depprune.

    Permite:
        - captura genérica de erros de configuração
        - distinção clara entre erro de operador e erro de execução
    """


class ConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração obrigatório
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Um arquivo passado explicitamente pelo operador também é obrigatório

    Limites explícitos:
        - Não tenta inferir ou criar configuração automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"check": {"polarity": "all_fail"}}
        - override: {"check": "cargo test"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando uma chave conhecida possui valor inválido
    (ex.: lista de comandos vazia, polaridade desconhecida).

    Limites explícitos:
        - Não realiza coerção de tipos
        - Não substitui o valor por um default
    """
