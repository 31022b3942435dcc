# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Este módulo valida o comportamento da função `deep_merge`, responsável
por acumular N fontes de configuração sobre um alvo.

Os testes asseguram que:
- o alvo é mutado in-place e devolvido
- valores escalares são sobrescritos pela última fonte
- dicionários são mesclados de forma recursiva
- listas e None substituem o valor existente por inteiro
- argumentos inválidos são rejeitados antes de qualquer mutação
- as fontes nunca são mutadas nem compartilhadas com o alvo
"""

import pytest

try:
    from confmerge.core.config.merge import deep_merge
    from confmerge.core.config.errors import InvalidArgumentError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    InvalidArgumentError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente quando o módulo de merge não pode ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/confmerge/core/config/merge.py (deep_merge)\n"
            "- src/confmerge/core/config/errors.py (InvalidArgumentError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "args",
    [
        (None,),
        ("non-object",),
        ([1, 2],),
        ({"a": 1}, None),
        ({"a": 1}, "non-object"),
        ({"a": 1}, 42),
        ({"a": 1}, ["a"]),
        ({"a": 1}, {"b": 2}, None),
    ],
)
def test_invalid_arguments_raise(args):
    """Alvo ou fonte que não seja mapeamento gera `InvalidArgumentError`."""
    _require_imports()
    with pytest.raises(InvalidArgumentError) as exc:
        deep_merge(*args)
    assert exc.value.kind == "INVALID_ARGUMENT"
    assert "Merge with invalid parameters" in str(exc.value)


def test_invalid_source_leaves_target_untouched():
    """
    Verifica que a validação ocorre antes da primeira mutação.

    Mesmo quando a fonte inválida é a última, as fontes válidas anteriores
    não são aplicadas.
    """
    _require_imports()
    target = {"a": 1}
    with pytest.raises(InvalidArgumentError):
        deep_merge(target, {"b": 2}, None)
    assert target == {"a": 1}


@pytest.mark.parametrize(
    "target, source, expected",
    [
        ({}, {"a": 1}, {"a": 1}),
        ({"a": 1}, {}, {"a": 1}),
        ({"a": 1, "b": True}, {"a": 2, "c": "test"}, {"a": 2, "b": True, "c": "test"}),
        (
            {"a": 1, "b": {"aa": 1, "bb": True}},
            {"a": 4, "b": {"aa": 5, "cc": "test"}},
            {"a": 4, "b": {"aa": 5, "bb": True, "cc": "test"}},
        ),
    ],
)
def test_merge_two_mappings(target, source, expected):
    _require_imports()
    result = deep_merge(target, source)
    assert result is target
    assert target == expected


def test_merge_multiple_sources_left_to_right():
    """
    Verifica que fontes são aplicadas estritamente da esquerda para a direita.

    Um None intermediário apaga a subárvore por inteiro; a fonte seguinte
    reconstrói `b` apenas com suas próprias chaves.
    """
    _require_imports()
    target = {"a": 1, "b": {"aa": 1, "bb": 2, "cc": 3}}
    result = deep_merge(target, {"b": None, "c": "test"}, {"b": {"dd": "test"}})
    assert result == {"a": 1, "b": {"dd": "test"}, "c": "test"}


def test_merge_is_order_sensitive():
    _require_imports()
    a = {"level": "INFO", "only_a": 1}
    b = {"level": "DEBUG", "only_b": 2}
    assert deep_merge({}, a, b)["level"] == "DEBUG"
    assert deep_merge({}, b, a)["level"] == "INFO"


def test_merge_without_sources_returns_target():
    _require_imports()
    target = {"a": 1}
    assert deep_merge(target) is target
    assert target == {"a": 1}


def test_merge_list_override_total():
    """Listas não são mescladas elemento a elemento."""
    _require_imports()
    target = {"steps": {"enabled": ["ingest", "train"]}}
    deep_merge(target, {"steps": {"enabled": ["ingest"]}})
    assert target == {"steps": {"enabled": ["ingest"]}}


def test_scalar_replaces_mapping_and_mapping_replaces_scalar():
    _require_imports()
    target = {"engine": {"fail_fast": True}, "mode": "simple"}
    deep_merge(target, {"engine": "DEBUG", "mode": {"kind": "advanced"}})
    assert target == {"engine": "DEBUG", "mode": {"kind": "advanced"}}


def test_mapping_replaces_list_wholesale():
    _require_imports()
    target = {"a": [1, 2]}
    deep_merge(target, {"a": {"x": 1}})
    assert target == {"a": {"x": 1}}


def test_existing_nested_mapping_is_extended_in_place():
    _require_imports()
    nested = {"uri": "A"}
    target = {"database": nested}
    deep_merge(target, {"database": {"user": "root"}})
    assert target["database"] is nested
    assert nested == {"uri": "A", "user": "root"}


def test_sources_are_not_mutated_nor_aliased():
    _require_imports()
    source = {"db": {"hosts": ["a", "b"], "opts": {"tls": True}}}
    target = {}
    deep_merge(target, source)

    target["db"]["hosts"].append("c")
    target["db"]["opts"]["tls"] = False

    assert source == {"db": {"hosts": ["a", "b"], "opts": {"tls": True}}}
    assert target["db"] is not source["db"]


def test_scenario_defaults_plus_override():
    """Chaves irmãs não sobrescritas sobrevivem ao override."""
    _require_imports()
    defaults = {"serverPort": 4070, "database": {"uri": "A"}}
    deep_merge(defaults, {"database": {"uri": "B"}})
    assert defaults == {"serverPort": 4070, "database": {"uri": "B"}}
