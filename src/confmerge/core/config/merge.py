# src/confmerge/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política oficial de deep-merge utilizada pelo
confmerge para acumular fontes de configuração em um único objeto.

Política de merge (v1):
    - mapping + mapping → merge recursivo por chave, in-place
    - qualquer outro par → sobrescrita total pelo valor da fonte
      (listas nunca são mescladas elemento a elemento; None apaga a subárvore)

Princípios fundamentais:
    - Fontes são aplicadas estritamente da esquerda para a direita
    - A última fonte vence em folhas conflitantes
    - O alvo é mutado e devolvido; as fontes nunca são mutadas

Invariantes:
    - Chaves não sobrescritas são preservadas
    - Nenhum valor da fonte é compartilhado com o alvo (cópias destacadas)
    - Argumentos inválidos são rejeitados antes de qualquer mutação

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida semântica de domínio
    - Não realiza coerção de tipos
"""

from collections.abc import Mapping, MutableMapping

from .errors import InvalidArgumentError
from .values import ValueKind, detach, kind_of


def deep_merge(target: MutableMapping, *sources: Mapping) -> MutableMapping:
    """
    Mescla recursivamente `sources` em `target`, na ordem recebida.

    Decisões arquiteturais:
        - O alvo é estendido in-place (mapeamentos aninhados existentes
          são reutilizados, não substituídos)
        - Escalares, sequências e None substituem o valor existente por inteiro
        - Todos os argumentos são validados antes da primeira mutação

    Args:
        target (MutableMapping): Objeto acumulador, mutado in-place.
        *sources (Mapping): Zero ou mais fontes, aplicadas da esquerda para a direita.

    Returns:
        MutableMapping: O próprio `target`, para encadeamento.

    Raises:
        InvalidArgumentError: Se `target` não for um mapeamento mutável ou
            se alguma fonte não for um mapeamento.
    """
    if not isinstance(target, MutableMapping):
        raise InvalidArgumentError("target", target)
    for position, source in enumerate(sources):
        if kind_of(source) is not ValueKind.MAPPING:
            raise InvalidArgumentError(f"sources[{position}]", source)

    for source in sources:
        _merge_mapping(target, source)
    return target


def _merge_mapping(target: MutableMapping, source: Mapping) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if kind_of(existing) is ValueKind.MAPPING and kind_of(value) is ValueKind.MAPPING:
            if not isinstance(existing, MutableMapping):
                # mapeamento somente-leitura no alvo: substituído por cópia própria
                existing = target[key] = detach(existing)
            _merge_mapping(existing, value)
        else:
            target[key] = detach(value)
