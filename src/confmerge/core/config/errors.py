# src/confmerge/core/config/errors.py
"""
Exceções canônicas da camada de configuração do confmerge.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o merge, o endereçamento por chave composta e o carregamento de arquivos
de configuração.

Princípios fundamentais:
    - Exceções são tipadas e carregam um identificador estável (`kind`)
    - Erros são levantados de forma síncrona na chamada que os causou
    - Mensagens de erro são claras e direcionadas ao chamador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção pode ser convertida em `ErrorPayload`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não realiza retry
"""

from __future__ import annotations

from typing import Any

from ..errors import ErrorPayload, FILE_INVALID, INVALID_ARGUMENT, file_invalid, invalid_argument


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Esta hierarquia permite captura genérica de qualquer falha da
    biblioteca via `except ConfigError`, mantendo a distinção por `kind`.
    """

    kind: str = "CONFIG_ERROR"

    def __init__(self, payload: ErrorPayload) -> None:
        super().__init__(payload.message)
        self.payload = payload

    @property
    def message(self) -> str:
        return self.payload.message

    def to_payload(self) -> ErrorPayload:
        return self.payload

    def __str__(self) -> str:
        return f"{self.kind}: {self.payload.message}"


class InvalidArgumentError(ConfigError):
    """
    Exceção levantada quando o alvo ou alguma fonte de um merge não é
    um mapeamento válido (None, escalares, listas...).

    Decisões arquiteturais:
        - Todos os argumentos são validados antes de qualquer mutação
        - O erro não é recuperável pela biblioteca: o chamador deve corrigir a chamada
    """

    kind = INVALID_ARGUMENT

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(
            invalid_argument(argument=argument, received_type=type(value).__name__)
        )
        self.argument = argument


class FileInvalidError(ConfigError):
    """
    Exceção levantada quando um caminho de configuração não pode ser carregado.

    Situações cobertas:
        - o caminho não existe ou é inacessível
        - o caminho direto possui extensão fora de {.json, .yml, .yaml}
        - o conteúdo não pode ser interpretado ou a raiz não é um mapeamento

    Invariantes:
        - Carrega sempre o caminho ofensor (`path`) e o diagnóstico (`reason`)

    Limites explícitos:
        - Entradas de diretório com extensão desconhecida NÃO geram este erro;
          são apenas ignoradas pela varredura do diretório
    """

    kind = FILE_INVALID

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(file_invalid(path=str(path), reason=reason))
        self.path = str(path)
        self.reason = reason
