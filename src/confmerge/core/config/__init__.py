# src/confmerge/core/config/__init__.py
"""
Camada de configuração do confmerge.

Este pacote contém as estruturas e utilitários responsáveis por mesclar,
endereçar e carregar configuração.

Responsabilidades do pacote:
    - Deep-merge determinístico de N fontes (`merge`)
    - Endereçamento por chave composta (`keys`)
    - Formatação camelCase de nomes externos (`casing`)
    - Interpretação de argumentos de linha de comando (`argv`)
    - Carregamento de arquivos JSON/YAML e diretórios (`loader`)
    - Store de configuração com ingestão de fontes (`configuration`)

Invariantes:
    - A configuração é sempre um dicionário puro (dict)
    - A mesma sequência de fontes sempre produz a mesma configuração
"""

from .configuration import Configuration
from .errors import ConfigError, FileInvalidError, InvalidArgumentError
from .keys import DEFAULT_DELIMITER
from .merge import deep_merge

__all__ = [
    "Configuration",
    "DEFAULT_DELIMITER",
    "deep_merge",
    "ConfigError",
    "InvalidArgumentError",
    "FileInvalidError",
]
