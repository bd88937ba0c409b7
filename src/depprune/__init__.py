# src/depprune/__init__.py
"""
depprune: poda mecânica de dependências declaradas em manifests.

Este pacote raiz define o namespace público do depprune, uma ferramenta que
remove, uma a uma, as dependências declaradas em cada manifest de uma árvore
de diretórios, revalida o projeto com um oráculo externo (comandos de check)
e restaura a dependência sempre que a verificação não a considera removível.

Princípios centrais:
    - Cada remoção é uma tentativa isolada (remover → persistir → validar)
    - O oráculo observa o disco, nunca a memória
    - Nenhuma decisão silenciosa: todo veredito é reportado
    - Falhas de I/O, parse ou spawn são fatais e explícitas

Arquitetura em alto nível:
    - core.config       → carregamento, merge, hashing e validação de configuração
    - core.oracle       → oráculo de validade baseado em comandos externos
    - core.manifest     → adapter de documento TOML e ponto de commit em disco
    - core.engine       → motor de remoção por tentativa e orquestração da árvore
    - core.traceability → registro (run record) e Event Log da execução
    - cli               → entrada de linha de comando

Limites explícitos:
    - Não resolve versões nem entende semântica do build system
    - Não executa nada em paralelo
"""
# src/depprune/__init__.py

__version__ = "0.1.0"

__all__ = ["__version__"]
