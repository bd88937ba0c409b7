# src/depprune/core/__init__.py
"""
Core do depprune.

Este pacote reúne a implementação canônica do depprune, independente da
CLI: configuração, oráculo de validade, adapter de manifest, motor de
remoção por tentativa e rastreabilidade.

O core é projetado para ser:
    - sequencial e previsível
    - testável de forma isolada (oráculo e store são injetáveis)
    - livre de dependências de CLI

Componentes principais:
    - config       → resolução de configuração (merge, validação, hashing)
    - oracle       → `ValidityOracle` e implementação por comandos externos
    - manifest     → `ManifestDocument` (tomlkit) e `ManifestStore` (commit em disco)
    - engine       → `Engine` (um manifest) e `Orchestrator` (árvore inteira)
    - traceability → `RunRecord` e Event Log

Limites explícitos:
    - Não faz parsing de argumentos de linha de comando
    - Não trata erros fatais: eles sempre propagam até o chamador
"""
