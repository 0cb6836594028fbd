# src/raftkeel/core/traceability/stamp.py
"""
Stamps de fingerprint dos hard settings.

Um stamp registra, junto aos dados persistidos, o fingerprint e os valores
dos hard settings em vigor quando os dados foram criados. Um processo em
startup (ou uma ferramenta que inspeciona um diretório de dados) compara o
stamp com o conjunto efetivo atual para detectar reconfiguração
incompatível.

Decisões arquiteturais:
    - O formato de persistência é JSON determinístico
    - Timestamps são normalizados para UTC
    - `check_stamp` apenas descreve a divergência; a decisão sobre o que
      fazer pertence à camada de storage que consome o resultado

Limites explícitos:
    - Não escolhe o caminho do stamp dentro do diretório de dados
    - Não aborta o processo nem bloqueia o storage
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import RaftkeelErrorPayload, settings_fingerprint_mismatch
from ..settings.hard import HardSettings
from ..settings.hashing import compute_hard_settings_fingerprint


def _iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


@dataclass
class SettingsStamp:
    """
    Registro persistível do fingerprint de hard settings.

    Campos:
        - fingerprint: fingerprint de 64 bits do conjunto em vigor
        - settings: valores indexados pelas chaves do arquivo de override
        - created_at: timestamp ISO 8601 (UTC) da criação do stamp
    """

    fingerprint: int
    settings: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fingerprint": self.fingerprint,
            "settings": dict(self.settings),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsStamp":
        return cls(
            fingerprint=int(data["fingerprint"]),
            settings=dict(data.get("settings", {}) or {}),
            created_at=data.get("created_at"),
        )


def create_stamp(settings: HardSettings, *, created_at: datetime) -> SettingsStamp:
    """Cria o stamp do conjunto efetivo de hard settings."""
    return SettingsStamp(
        fingerprint=compute_hard_settings_fingerprint(settings),
        settings=settings.to_dict(),
        created_at=_iso(created_at),
    )


def save_stamp(stamp: SettingsStamp, path: Path) -> None:
    """
    Persiste um stamp em disco no formato JSON.

    Raises:
        OSError: Em caso de falha ao criar diretórios ou escrever o arquivo.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(stamp.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def load_stamp(path: Path) -> SettingsStamp:
    """
    Carrega um stamp persistido.

    Raises:
        OSError: Em caso de falha de leitura do arquivo.
        json.JSONDecodeError: Em caso de JSON inválido.
        KeyError: Se o campo `fingerprint` estiver ausente.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return SettingsStamp.from_dict(data)


def check_stamp(stamp: SettingsStamp, settings: HardSettings) -> Optional[RaftkeelErrorPayload]:
    """
    Compara um stamp com o conjunto efetivo de hard settings.

    Returns:
        Optional[RaftkeelErrorPayload]: `None` quando os fingerprints
        coincidem; caso contrário, payload `SETTINGS_FINGERPRINT_MISMATCH`
        com as chaves cujos valores divergem do stamp.
    """
    effective = compute_hard_settings_fingerprint(settings)
    if effective == stamp.fingerprint:
        return None

    current = settings.to_dict()
    changed = [key for key, value in current.items() if stamp.settings.get(key) != value]

    return settings_fingerprint_mismatch(
        stamped_fingerprint=stamp.fingerprint,
        effective_fingerprint=effective,
        changed_fields=changed,
    )
