# src/confmerge/core/config/argv.py
"""
Parser mínimo de argumentos de linha de comando no formato chave/valor.

Diferente de um `argparse.ArgumentParser`, nenhuma opção é declarada de
antemão: qualquer `--chave` encontrada vira uma entrada no dicionário
resultante. Convenções suportadas:

    --key value       → {"key": "value"}
    --key=value       → {"key": "value"}
    --flag            → {"flag": True}
    --no-flag         → {"flag": False}
    -abc              → {"a": True, "b": True, "c": True}
    -p 8080           → {"p": 8080}
    --tag a --tag b   → {"tag": ["a", "b"]}
    --server-port 80  → {"server-port": 80, "serverPort": 80}
    palavras soltas   → {"_": [...]}
    após `--`         → tudo vai para `_`

Valores com aparência numérica são convertidos para int/float; nenhuma
outra coerção é aplicada.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Dict, List, Optional, Sequence

from .casing import camel_case

POSITIONAL_KEY = "_"
SCRIPT_KEY = "$0"

_INT = re.compile(r"^[-+]?(0|[1-9]\d*)$")
_FLOAT = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


def coerce_number(raw: str) -> Any:
    if _INT.match(raw):
        return int(raw)
    if _FLOAT.match(raw) and any(mark in raw for mark in ".eE"):
        return float(raw)
    return raw


def _is_option(token: str) -> bool:
    if token == "-" or not token.startswith("-"):
        return False
    # números negativos são valores, não opções
    return not _FLOAT.match(token)


def _assign(parsed: Dict[str, Any], key: str, value: Any) -> None:
    keys = [key]
    if "-" in key:
        alias = camel_case(key)
        if alias and alias != key:
            keys.append(alias)
    for name in keys:
        if name in parsed:
            current = parsed[name]
            if isinstance(current, list):
                current.append(value)
            else:
                parsed[name] = [current, value]
        else:
            parsed[name] = value


def parse_argv(args: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """
    Converte uma lista de argumentos em um dicionário chave/valor.

    Args:
        args (Optional[Sequence[str]]): Argumentos a interpretar. Quando
            omitido, usa `sys.argv[1:]` e registra `sys.argv[0]` em `$0`.

    Returns:
        Dict[str, Any]: Pares chave/valor; posicionais ficam em `_`.
    """
    parsed: Dict[str, Any] = {}
    if args is None:
        parsed[SCRIPT_KEY] = sys.argv[0] if sys.argv else ""
        args = sys.argv[1:]

    positionals: List[Any] = []
    tokens = list(args)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token == "--":
            positionals.extend(coerce_number(rest) for rest in tokens[index:])
            break

        if not _is_option(token):
            positionals.append(coerce_number(token))
            continue

        if token.startswith("--"):
            body = token[2:]
            if "=" in body:
                key, raw = body.split("=", 1)
                if not key:
                    positionals.append(token)
                    continue
                _assign(parsed, key, coerce_number(raw))
            elif body.startswith("no-") and len(body) > 3:
                _assign(parsed, body[3:], False)
            elif index < len(tokens) and not _is_option(tokens[index]):
                _assign(parsed, body, coerce_number(tokens[index]))
                index += 1
            else:
                _assign(parsed, body, True)
            continue

        # opções curtas agrupadas: apenas a última letra pode receber valor
        letters = token[1:]
        if "=" in letters:
            letters, raw = letters.split("=", 1)
            if not letters:
                positionals.append(token)
                continue
            for letter in letters[:-1]:
                _assign(parsed, letter, True)
            _assign(parsed, letters[-1], coerce_number(raw))
            continue
        for letter in letters[:-1]:
            _assign(parsed, letter, True)
        last = letters[-1]
        if index < len(tokens) and not _is_option(tokens[index]):
            _assign(parsed, last, coerce_number(tokens[index]))
            index += 1
        else:
            _assign(parsed, last, True)

    parsed[POSITIONAL_KEY] = positionals
    return parsed
