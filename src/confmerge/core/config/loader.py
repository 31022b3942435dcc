# src/confmerge/core/config/loader.py
"""
Loader canônico de arquivos de configuração do confmerge.

Este módulo é responsável por ler arquivos e diretórios de configuração
do disco e convertê-los em fragmentos (dicionários) prontos para o merge.

Formatos suportados (v1):
    - JSON com comentários (.json), via hjson
    - YAML (.yaml, .yml), via PyYAML

Política de diretórios:
    - Apenas entradas imediatas (sem recursão em subdiretórios)
    - Entradas ordenadas lexicograficamente pelo nome
    - Arquivos com extensão desconhecida são ignorados (não geram erro)

Princípios fundamentais:
    - O formato é determinado exclusivamente pela extensão
    - Arquivos vazios são interpretados como dicionários vazios
    - Falhas de leitura e de parse são convertidas em `FileInvalidError`

Invariantes:
    - O retorno de `load_file` é sempre um dicionário
    - Nenhum merge é realizado neste módulo

Limites explícitos:
    - Não valida semântica de domínio
    - Não observa alterações em disco (sem live reload)
    - Não acessa fontes remotas
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import hjson  # JSON com comentários
import yaml  # PyYAML

from .errors import FileInvalidError
from .values import ValueKind, detach, kind_of

JSON_EXTENSIONS = frozenset({".json"})
YAML_EXTENSIONS = frozenset({".yaml", ".yml"})
SUPPORTED_EXTENSIONS = JSON_EXTENSIONS | YAML_EXTENSIONS

INVALID_EXTENSION = "Configuration file has an invalid extension"

PathLike = Union[str, Path]


def is_supported(path: PathLike) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix in JSON_EXTENSIONS:
        return hjson.loads(text)
    return yaml.safe_load(text)


def load_file(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Decisões arquiteturais:
        - A extensão é verificada antes de qualquer leitura
        - O conteúdo raiz deve ser um mapeamento
        - Mapeamentos retornados pelos parsers são convertidos em `dict`

    Args:
        path (PathLike): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        FileInvalidError: Se a extensão não for suportada, se o arquivo não
            puder ser lido, se o parse falhar ou se a raiz não for um mapeamento.
    """
    path = Path(path)
    if not is_supported(path):
        raise FileInvalidError(path, INVALID_EXTENSION)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileInvalidError(path, str(e)) from e

    # HjsonDecodeError herda de ValueError; PyYAML levanta ValueError em datas inválidas
    try:
        data = _parse(path, text)
    except (ValueError, OverflowError, RecursionError, yaml.YAMLError) as e:
        raise FileInvalidError(path, str(e)) from e

    if data is None:
        return {}

    if kind_of(data) is not ValueKind.MAPPING:
        raise FileInvalidError(
            path, f"Config root deve ser um mapeamento, recebido: {type(data).__name__}"
        )

    return detach(data)


def load_directory(path: PathLike) -> Tuple[List[Tuple[Path, Dict[str, Any]]], List[Path]]:
    """
    Carrega todos os arquivos de configuração suportados de um diretório.

    Args:
        path (PathLike): Caminho do diretório.

    Returns:
        Tuple: `(carregados, ignorados)`, onde `carregados` é a lista ordenada
        de pares `(caminho, conteúdo)` e `ignorados` lista as entradas puladas
        (subdiretórios e extensões desconhecidas).

    Raises:
        FileInvalidError: Se o diretório não puder ser listado ou se algum
            arquivo suportado falhar ao carregar.
    """
    directory = Path(path)
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise FileInvalidError(directory, str(e)) from e

    loaded: List[Tuple[Path, Dict[str, Any]]] = []
    skipped: List[Path] = []
    for entry in entries:
        if not entry.is_file() or not is_supported(entry):
            skipped.append(entry)
            continue
        loaded.append((entry, load_file(entry)))
    return loaded, skipped
