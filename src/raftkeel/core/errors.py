"""
raftkeel — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do raftkeel.
Falhas na resolução dos hard settings fazem parte do contrato operacional
do sistema e devem ser:

- explícitas
- serializáveis
- acionáveis pelo operador

Nenhum fallback silencioso é permitido.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RaftkeelErrorPayload:
    """
    Payload canônico de erro do raftkeel.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
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

# Override de hard settings
SETTINGS_OVERRIDE_UNREADABLE = "SETTINGS_OVERRIDE_UNREADABLE"
SETTINGS_OVERRIDE_INVALID_FIELD = "SETTINGS_OVERRIDE_INVALID_FIELD"

# Compatibilidade com dados persistidos
SETTINGS_FINGERPRINT_MISMATCH = "SETTINGS_FINGERPRINT_MISMATCH"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def settings_override_unreadable(
    *,
    source: str,
    reason: str,
    hint: str = "Corrija a sintaxe do arquivo de override ou remova-o para usar os defaults.",
) -> RaftkeelErrorPayload:
    return RaftkeelErrorPayload(
        type=SETTINGS_OVERRIDE_UNREADABLE,
        message="Arquivo de override de hard settings ilegível",
        details={
            "source": source,
            "reason": reason,
        },
        hint=hint,
    )


def settings_override_invalid_field(
    *,
    source: str,
    field: str,
    expected_type: str,
    actual_type: str,
    hint: str = "Ajuste o valor do campo para o tipo esperado antes de reiniciar o processo.",
) -> RaftkeelErrorPayload:
    return RaftkeelErrorPayload(
        type=SETTINGS_OVERRIDE_INVALID_FIELD,
        message="Campo do override de hard settings com tipo incompatível",
        details={
            "source": source,
            "field": field,
            "expected_type": expected_type,
            "actual_type": actual_type,
        },
        hint=hint,
    )


def settings_fingerprint_mismatch(
    *,
    stamped_fingerprint: int,
    effective_fingerprint: int,
    changed_fields: List[str],
    hint: str = (
        "Os hard settings em vigor diferem dos usados para gravar os dados. "
        "Restaure os valores originais; alterá-los após o deploy corrompe o estado persistido."
    ),
) -> RaftkeelErrorPayload:
    return RaftkeelErrorPayload(
        type=SETTINGS_FINGERPRINT_MISMATCH,
        message="Fingerprint dos hard settings incompatível com os dados persistidos",
        details={
            "stamped_fingerprint": stamped_fingerprint,
            "effective_fingerprint": effective_fingerprint,
            "changed_fields": changed_fields,
        },
        hint=hint,
    )
