# tests/conftest.py
"""
Fixtures compartilhados para testes do confmerge.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de configuração mínimos e determinísticos (YAML e JSON com comentários)
- um diretório de configuração montado em `tmp_path`
- um ambiente (environ) controlado, sem depender de `os.environ`

Decisões arquiteturais:
    - Conteúdos são fornecidos como strings e gravados apenas em `tmp_path`
    - Nenhuma fixture altera o ambiente real do processo

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

from pathlib import Path

import pytest


# =====================================================
# Conteúdos de configuração
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """YAML de configuração padrão (defaults) semelhante ao uso real."""
    return """\
serverPort: 4070
database:
  uri: A
  pool:
    min: 1
    max: 10
plugins:
  - auth
  - metrics
"""


@pytest.fixture
def override_yaml() -> str:
    """YAML de override: altera apenas `database.uri` e a lista de plugins."""
    return """\
database:
  uri: B
plugins:
  - auth
"""


@pytest.fixture
def commented_json() -> str:
    """JSON com comentários de linha e de bloco (formato aceito pelo hjson)."""
    return """\
{
  // porta do servidor
  "serverPort": 8080,
  /* conexão
     principal */
  "mongo": {"urlConnection": "mongodb://localhost:27017"}
}
"""


# =====================================================
# Diretório de configuração
# =====================================================

@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """
    Diretório com dois JSON em ordem alfabética, um YAML, um arquivo sem
    extensão e um subdiretório (que não deve ser percorrido).

    Conteúdo:
        test_1.json → {"name": "one", "shared": {"a": 1, "b": 1}}
        test_2.json → {"name": "two", "shared": {"b": 2}}
        test_3.yml  → {"extra": true}
        readme      → texto livre (ignorado)
        nested/     → contém deep.json (ignorado)
    """
    directory = tmp_path / "dir"
    directory.mkdir()
    (directory / "test_2.json").write_text(
        '{"name": "two", "shared": {"b": 2}}', encoding="utf-8"
    )
    (directory / "test_1.json").write_text(
        '{\n  // primeiro arquivo\n  "name": "one",\n  "shared": {"a": 1, "b": 1}\n}',
        encoding="utf-8",
    )
    (directory / "test_3.yml").write_text("extra: true\n", encoding="utf-8")
    (directory / "readme").write_text("not a configuration file\n", encoding="utf-8")
    nested = directory / "nested"
    nested.mkdir()
    (nested / "deep.json").write_text('{"deep": true}', encoding="utf-8")
    return directory


# =====================================================
# Ambiente
# =====================================================

@pytest.fixture
def fake_environ() -> dict:
    """Ambiente controlado passado explicitamente para `Configuration.env`."""
    return {
        "MONGO:URL_CONNECTION": "mongodb://localhost:27017",
        "CONFIG_FILE": "/etc/project/config.json",
        "CONFIG_DIR": "/etc/project",
        "NOT_REQUIRED": "not required value",
    }
