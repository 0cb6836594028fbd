# tests/core/settings/test_hashing.py
"""
Testes do fingerprint dos hard settings.

Este módulo valida a função que reduz o conjunto efetivo de hard settings
a um inteiro sem sinal de 64 bits, usado para detectar reconfiguração
incompatível com dados persistidos.

Os testes asseguram que:
- a chave textual segue o formato fixo `d-d-bool-d-d`
- o algoritmo corresponde ao MD5 da chave, 8 primeiros bytes em little-endian
- conjuntos idênticos produzem o mesmo fingerprint
- alterar qualquer campo altera o fingerprint

Invariantes:
    - O fingerprint está sempre em [0, 2**64)
    - O cálculo não depende de estado externo
"""

import dataclasses
import hashlib
import struct

import pytest

try:
    from raftkeel.core.settings.hashing import (
        compute_hard_settings_fingerprint,
        hard_settings_key,
    )
    from raftkeel.core.settings.hard import HardSettings, default_hard_settings
except Exception as e:  # noqa: BLE001
    compute_hard_settings_fingerprint = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o módulo de hashing esteja disponível para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing hashing module. Implement:\n"
            "- src/raftkeel/core/settings/hashing.py (compute_hard_settings_fingerprint)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _reference_fingerprint(key: str) -> int:
    """
    Referência explícita do algoritmo: MD5 da chave, primeiros 8 bytes
    interpretados como uint64 little-endian.
    """
    digest = hashlib.md5(key.encode("utf-8")).digest()
    return struct.unpack("<Q", digest[:8])[0]


def test_default_key_format():
    _require_imports()
    assert hard_settings_key(default_hard_settings()) == "16-16-false-4096-48"


def test_fingerprint_matches_reference_algorithm():
    _require_imports()
    s = default_hard_settings()
    assert compute_hard_settings_fingerprint(s) == _reference_fingerprint("16-16-false-4096-48")


def test_fingerprint_is_deterministic_for_identical_sets():
    """
    Verifica que conjuntos idênticos campo a campo, construídos de forma
    independente, produzem o mesmo fingerprint.
    """
    _require_imports()
    a = default_hard_settings()
    b = HardSettings(
        worker_count=16,
        store_pool_size=16,
        use_range_delete=False,
        max_cached_sessions=4096,
        entry_batch_size=48,
    )
    assert a is not b
    assert compute_hard_settings_fingerprint(a) == compute_hard_settings_fingerprint(b)
    assert a.fingerprint() == compute_hard_settings_fingerprint(a)


@pytest.mark.parametrize(
    "changes",
    [
        {"worker_count": 32},
        {"store_pool_size": 8},
        {"use_range_delete": True},
        {"max_cached_sessions": 8192},
        {"entry_batch_size": 64},
    ],
)
def test_changing_any_field_changes_fingerprint(changes):
    _require_imports()
    base = default_hard_settings()
    other = dataclasses.replace(base, **changes)
    assert compute_hard_settings_fingerprint(other) != compute_hard_settings_fingerprint(base)


def test_fingerprint_is_unsigned_64_bit():
    _require_imports()
    s = HardSettings(
        worker_count=2 ** 64 - 1,
        store_pool_size=0,
        use_range_delete=True,
        max_cached_sessions=1,
        entry_batch_size=1,
    )
    fp = compute_hard_settings_fingerprint(s)
    assert 0 <= fp < 2 ** 64
    assert hard_settings_key(s) == "18446744073709551615-0-true-1-1"


def test_non_hard_settings_input_raises_type_error():
    _require_imports()
    with pytest.raises(TypeError):
        compute_hard_settings_fingerprint(default_hard_settings().to_dict())
