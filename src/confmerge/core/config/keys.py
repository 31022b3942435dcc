# src/confmerge/core/config/keys.py
"""
Endereçamento por chave composta.

Uma chave composta é uma sequência de segmentos unidos por um delimitador
(padrão `:`), por exemplo `mongo:urlConnection`. Este módulo concentra as
três operações sobre chaves compostas usadas pela `Configuration`:

    - split_key      → chave composta → lista de segmentos
    - build_fragment → segmentos + valor → fragmento aninhado
    - lookup         → leitura de um nó a partir dos segmentos
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from .errors import InvalidArgumentError
from .values import ValueKind, kind_of

DEFAULT_DELIMITER = ":"


def split_key(key: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    if not isinstance(key, str) or not key:
        raise InvalidArgumentError("key", key)
    if not isinstance(delimiter, str) or not delimiter:
        raise InvalidArgumentError("delimiter", delimiter)
    return key.split(delimiter)


def build_fragment(segments: Sequence[str], value: Any) -> Dict[str, Any]:
    """
    Constrói o fragmento `{s0: {s1: {...: value}}}` para os segmentos dados.

    O fragmento é efêmero: existe apenas para ser mesclado na configuração.
    """
    if not segments:
        raise InvalidArgumentError("segments", segments)
    fragment: Any = value
    for segment in reversed(segments):
        fragment = {segment: fragment}
    return fragment


def lookup(tree: Mapping[str, Any], segments: Sequence[str]) -> Tuple[bool, Any]:
    """
    Percorre `tree` segmento a segmento.

    Returns:
        Tuple[bool, Any]: `(True, nó)` quando o caminho existe, ou
        `(False, None)` assim que um segmento falta ou o nó corrente não é
        um mapeamento enquanto ainda restam segmentos.
    """
    node: Any = tree
    for segment in segments:
        if kind_of(node) is not ValueKind.MAPPING or segment not in node:
            return False, None
        node = node[segment]
    return True, node
