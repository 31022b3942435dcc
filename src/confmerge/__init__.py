# src/confmerge/__init__.py
"""
confmerge: composição determinística de configuração a partir de múltiplas fontes.

Este pacote raiz define o namespace público do confmerge. Uma única
`Configuration` acumula valores individuais, mapeamentos, variáveis de
ambiente, argumentos de linha de comando e arquivos JSON/YAML, com
precedência explícita: a última fonte vence e mapeamentos aninhados são
mesclados recursivamente.

Arquitetura em alto nível:
    - core.config.merge         → deep-merge de N fontes sobre um alvo
    - core.config.keys          → endereçamento por chave composta
    - core.config.configuration → store de configuração e ingestão de fontes
    - core.config.loader        → leitura de arquivos e diretórios
    - core.errors               → payload canônico de erro

Limites explícitos:
    - Não valida schema
    - Não observa alterações em disco
    - Não acessa fontes remotas nem trata segredos
"""
# src/confmerge/__init__.py
from .core.config import (
    ConfigError,
    Configuration,
    FileInvalidError,
    InvalidArgumentError,
    deep_merge,
)

__all__ = [
    "Configuration",
    "deep_merge",
    "ConfigError",
    "InvalidArgumentError",
    "FileInvalidError",
]
