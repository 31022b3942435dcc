# src/confmerge/core/config/values.py
"""
Classificação explícita dos valores de configuração.

Todo valor presente na árvore de configuração pertence a exatamente uma
das categorias abaixo:

    - MAPPING  → mapeamento aninhado (dict ou qualquer `Mapping`)
    - SEQUENCE → lista ou tupla (sempre tratada como valor atômico no merge)
    - SCALAR   → str, bytes, números, booleanos e demais objetos
    - NULL     → None

O deep-merge decide entre recursão e sobrescrita exclusivamente a partir
desta classificação, nunca por inspeção ad hoc de tipos.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    NULL = "null"


def kind_of(value: Any) -> ValueKind:
    """Retorna a categoria de `value`. Strings e bytes são escalares."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def detach(value: Any) -> Any:
    """
    Retorna uma cópia própria de `value` pronta para ser anexada à árvore.

    Mapeamentos viram `dict` e sequências viram `list`, recursivamente,
    de modo que nenhum objeto do chamador passa a ser compartilhado com o
    estado interno da configuração.
    """
    kind = kind_of(value)
    if kind is ValueKind.MAPPING:
        return {key: detach(item) for key, item in value.items()}
    if kind is ValueKind.SEQUENCE:
        return [detach(item) for item in value]
    return value
