# tests/core/traceability/test_stamp.py
"""
Testes dos stamps de fingerprint dos hard settings.

Os testes asseguram que:
- o stamp registra fingerprint e valores do conjunto efetivo
- o stamp persistido em JSON é restaurado sem perda
- `check_stamp` aceita o mesmo conjunto e descreve divergências

Limites explícitos:
    - Não valida a política da camada de storage em caso de divergência
"""

import dataclasses
from datetime import datetime, timezone

from raftkeel.core.errors import SETTINGS_FINGERPRINT_MISMATCH
from raftkeel.core.settings.hard import default_hard_settings
from raftkeel.core.traceability.stamp import (
    check_stamp,
    create_stamp,
    load_stamp,
    save_stamp,
)

CREATED_AT = datetime(2026, 1, 16, 12, 0, 0, tzinfo=timezone.utc)


def test_create_stamp_records_fingerprint_and_values():
    s = default_hard_settings()
    stamp = create_stamp(s, created_at=CREATED_AT)

    assert stamp.fingerprint == s.fingerprint()
    assert stamp.settings == s.to_dict()
    assert stamp.created_at == "2026-01-16T12:00:00+00:00"


def test_naive_timestamp_is_treated_as_utc():
    stamp = create_stamp(default_hard_settings(), created_at=datetime(2026, 1, 16, 12, 0, 0))
    assert stamp.created_at.endswith("+00:00")


def test_save_and_load_stamp(tmp_path):
    stamp = create_stamp(default_hard_settings(), created_at=CREATED_AT)
    path = tmp_path / "data" / "hard-settings.stamp.json"

    save_stamp(stamp, path)
    restored = load_stamp(path)

    assert restored == stamp


def test_check_stamp_accepts_identical_settings():
    stamp = create_stamp(default_hard_settings(), created_at=CREATED_AT)
    assert check_stamp(stamp, default_hard_settings()) is None


def test_check_stamp_reports_changed_fields():
    """
    Verifica que a reconfiguração após o stamp é detectada e que o payload
    lista as chaves alteradas, sem decidir o que fazer com a divergência.
    """
    stamp = create_stamp(default_hard_settings(), created_at=CREATED_AT)
    current = dataclasses.replace(default_hard_settings(), worker_count=32, use_range_delete=True)

    payload = check_stamp(stamp, current)

    assert payload is not None
    assert payload.type == SETTINGS_FINGERPRINT_MISMATCH
    assert payload.details["stamped_fingerprint"] == stamp.fingerprint
    assert payload.details["effective_fingerprint"] == current.fingerprint()
    assert payload.details["changed_fields"] == ["WorkerCount", "UseRangeDelete"]
