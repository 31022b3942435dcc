# src/confmerge/core/config/configuration.py
"""
Store de configuração endereçável por chave composta.

Este módulo define a `Configuration`, a estrutura canônica que acumula
configuração a partir de múltiplas fontes em um único objeto em memória:

    - set(key, value)  → valor individual por chave composta
    - merge(*sources)  → mapeamentos fornecidos pelo chamador
    - env(whitelist)   → variáveis de ambiente (nomes em camelCase)
    - argv(whitelist)  → argumentos de linha de comando
    - file(path)       → arquivo JSON/YAML ou diretório de arquivos

Toda operação de ingestão constrói um fragmento de configuração e o mescla
no objeto acumulado via `deep_merge`, de modo que a última fonte vence em
folhas conflitantes e mapeamentos aninhados são unidos recursivamente.

Princípios fundamentais:
    - Cada instância possui sua própria árvore (sem estado global)
    - Cada chamada é atômica: ou aplica todo o seu efeito ou nenhum
    - Toda ingestão é registrada como evento estruturado

Invariantes:
    - O objeto de configuração é igual ao fold à esquerda do deep-merge
      de todos os fragmentos, na ordem das chamadas
    - `get` nunca muta a configuração

Limites explícitos:
    - Não valida schema nem converte tipos
    - Não observa arquivos (sem live reload)
    - Não sincroniza acesso concorrente
"""

from __future__ import annotations

import argparse
import os
import stat
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .argv import parse_argv
from .casing import format_composed_key
from .errors import FileInvalidError, InvalidArgumentError
from .keys import DEFAULT_DELIMITER, build_fragment, lookup, split_key
from .loader import load_directory, load_file
from .merge import deep_merge

ArgvSource = Union[Sequence[str], Mapping, argparse.Namespace, None]


class Configuration:
    """
    Configuração acumulada a partir de valores, mapeamentos, ambiente,
    linha de comando e arquivos.

    Decisões arquiteturais:
        - Métodos de ingestão retornam a própria instância (encadeamento)
        - O delimitador de chaves compostas é fixado na construção
        - Logs são eventos estruturados em `events`; sinais não fatais
          (ex.: arquivos ignorados em um diretório) vão para `warnings`

    Example:
        >>> config = Configuration().merge({"serverPort": 4070}).set("database:uri", "A")
        >>> config.get("database:uri")
        'A'
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        if not isinstance(delimiter, str) or not delimiter:
            raise InvalidArgumentError("delimiter", delimiter)
        self.delimiter = delimiter
        self._config: Dict[str, Any] = {}
        self.events: List[Dict[str, Any]] = []
        self.warnings: List[str] = []

    def __repr__(self) -> str:
        return f"Configuration(delimiter={self.delimiter!r}, keys={sorted(self._config)!r})"

    # -----------------------------
    # Leitura
    # -----------------------------
    def get(self, key: Optional[str] = None) -> Any:
        """
        Retorna o valor no caminho `key`, ou a configuração inteira.

        Sem `key`, devolve o próprio objeto interno (não é uma cópia).
        Com `key`, devolve `None` quando algum segmento não existe.
        """
        if not key:
            return self._config
        _, value = lookup(self._config, split_key(key, self.delimiter))
        return value

    # -----------------------------
    # Ingestão
    # -----------------------------
    def set(self, key: str, value: Any) -> "Configuration":
        fragment = build_fragment(split_key(key, self.delimiter), value)
        deep_merge(self._config, fragment)
        self.log(source="set", level="debug", message="key set", key=key)
        return self

    def merge(self, *sources: Mapping) -> "Configuration":
        deep_merge(self._config, *sources)
        self.log(source="merge", level="debug", message="sources merged", count=len(sources))
        return self

    def env(
        self,
        whitelist: Optional[Iterable[str]] = None,
        environ: Optional[Mapping] = None,
    ) -> "Configuration":
        """
        Mescla variáveis de ambiente na configuração.

        Os nomes são convertidos para camelCase segmento a segmento
        (`MONGO:URL_CONNECTION` → `mongo:urlConnection`). A whitelist é
        comparada contra o nome formatado; suas entradas também são
        formatadas, então `MONGO:URL_CONNECTION` e `mongo:urlConnection`
        selecionam a mesma variável.

        Args:
            whitelist (Optional[Iterable[str]]): Nomes permitidos.
            environ (Optional[Mapping]): Ambiente a ler (padrão: `os.environ`).
        """
        environ = os.environ if environ is None else environ
        allowed = None
        if whitelist is not None:
            allowed = {format_composed_key(name, self.delimiter) for name in whitelist}

        fragments = []
        for name in sorted(environ):
            formatted = format_composed_key(name, self.delimiter)
            if allowed is not None and formatted not in allowed:
                continue
            segments = formatted.split(self.delimiter)
            if not all(segments):
                self.add_warning(f"environment variable {name!r} has no usable key")
                continue
            fragments.append(build_fragment(segments, environ[name]))

        deep_merge(self._config, *fragments)
        self.log(source="env", level="info", message="environment merged", count=len(fragments))
        return self

    def argv(
        self,
        whitelist: Optional[Iterable[str]] = None,
        args: ArgvSource = None,
    ) -> "Configuration":
        """
        Mescla argumentos de linha de comando na configuração.

        As chaves são usadas como recebidas (sem camelCase), inclusive os
        posicionais (`_`) e o nome do script (`$0`).

        Args:
            whitelist (Optional[Iterable[str]]): Chaves permitidas.
            args: Lista de strings (interpretada por `parse_argv`), mapeamento
                já interpretado, `argparse.Namespace`, ou None para `sys.argv`.
        """
        if isinstance(args, argparse.Namespace):
            parsed: Mapping = vars(args)
        elif isinstance(args, Mapping):
            parsed = args
        else:
            parsed = parse_argv(args)

        allowed = None if whitelist is None else set(whitelist)
        fragments = []
        for key, value in parsed.items():
            if allowed is not None and key not in allowed:
                continue
            fragments.append(build_fragment(split_key(key, self.delimiter), value))

        deep_merge(self._config, *fragments)
        self.log(source="argv", level="info", message="arguments merged", count=len(fragments))
        return self

    def file(self, path: Union[str, Path]) -> "Configuration":
        """
        Mescla um arquivo de configuração ou todos os arquivos de um diretório.

        Política:
            - Diretório: entradas imediatas em ordem alfabética; extensões
              desconhecidas e subdiretórios são ignorados
            - Arquivo: `.json` (com comentários) ou `.yml`/`.yaml`;
              qualquer outra extensão gera `FileInvalidError`
            - Caminho inexistente ou inacessível gera `FileInvalidError`

        Todos os arquivos são carregados antes do primeiro merge: se algum
        falhar, a configuração permanece inalterada.

        Raises:
            FileInvalidError: Ver política acima.
        """
        target = Path(path)
        try:
            mode = target.stat().st_mode
        except OSError as e:
            raise FileInvalidError(path, str(e)) from e

        if stat.S_ISDIR(mode):
            loaded, skipped = load_directory(target)
            for entry in skipped:
                self.add_warning(f"skipped {entry}: not a supported configuration file")
        else:
            loaded = [(target, load_file(target))]

        deep_merge(self._config, *(content for _, content in loaded))
        for entry, _ in loaded:
            self.log(source="file", level="info", message="file merged", path=str(entry))
        return self

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
