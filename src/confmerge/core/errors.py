# src/confmerge/core/errors.py
"""
confmerge: Estruturas canônicas de erro (v1)

Este módulo define o payload canônico de erro do confmerge.
Erros fazem parte do contrato público da biblioteca e devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhum fallback silencioso é permitido.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do confmerge.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

INVALID_ARGUMENT = "INVALID_ARGUMENT"
FILE_INVALID = "FILE_INVALID"


def invalid_argument(
    *,
    argument: str,
    received_type: str,
    hint: str = "Passe apenas mapeamentos (dict) como alvo e fontes do merge.",
) -> ErrorPayload:
    return ErrorPayload(
        type=INVALID_ARGUMENT,
        message="Merge with invalid parameters",
        details={"argument": argument, "received_type": received_type},
        hint=hint,
    )


def file_invalid(
    *,
    path: str,
    reason: str,
    hint: str = "Verifique se o caminho existe e se a extensão é .json, .yml ou .yaml.",
) -> ErrorPayload:
    return ErrorPayload(
        type=FILE_INVALID,
        message=f'Invalid configuration file: "{path}". {reason}',
        details={"path": path, "reason": reason},
        hint=hint,
    )
