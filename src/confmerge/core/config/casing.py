# src/confmerge/core/config/casing.py
"""
Formatação camelCase de nomes vindos do ambiente e da linha de comando.

Exemplos:
    URL_CONNECTION → urlConnection
    server-port    → serverPort
    configFile     → configFile
    ÉCOLE_NAME     → écoleName
"""

from __future__ import annotations

import re
from typing import List

# separadores: qualquer caractere que não seja letra ou dígito (Unicode)
_SEPARATORS = re.compile(r"[\W_]+")


def _split_case(chunk: str) -> List[str]:
    # fronteiras: minúscula → maiúscula, letra ↔ dígito, e sigla seguida de
    # palavra capitalizada (HTTPServer → HTTP Server)
    words = []
    current = chunk[0]
    for previous, char, following in zip(chunk, chunk[1:], chunk[2:] + " "):
        boundary = (
            (previous.islower() and char.isupper())
            or previous.isdigit() != char.isdigit()
            or (previous.isupper() and char.isupper() and following.islower())
        )
        if boundary:
            words.append(current)
            current = char
        else:
            current += char
    words.append(current)
    return words


def split_words(token: str) -> List[str]:
    words: List[str] = []
    for chunk in _SEPARATORS.split(token):
        if chunk:
            words.extend(_split_case(chunk))
    return words


def camel_case(token: str) -> str:
    words = split_words(token)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def format_composed_key(key: str, delimiter: str) -> str:
    """Aplica `camel_case` a cada segmento da chave composta, preservando o delimitador."""
    return delimiter.join(camel_case(segment) for segment in key.split(delimiter))
