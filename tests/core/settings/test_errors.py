# tests/core/settings/test_errors.py
"""
Testes do mapeamento de exceções de settings para payloads canônicos.

Os testes asseguram que toda falha de override pode ser convertida em
um `RaftkeelErrorPayload` serializável, identificando fonte e campo.
"""

import json

import pytest

from raftkeel.core.errors import (
    SETTINGS_OVERRIDE_INVALID_FIELD,
    SETTINGS_OVERRIDE_UNREADABLE,
)
from raftkeel.core.settings.errors import OverrideFieldTypeError, OverrideParseError
from raftkeel.core.settings.loader import load_hard_settings


def test_field_type_error_payload(workdir, write_override):
    path = write_override({"EntryBatchSize": "48"})

    with pytest.raises(OverrideFieldTypeError) as excinfo:
        load_hard_settings(workdir=workdir)

    payload = excinfo.value.to_payload().to_dict()
    assert payload["type"] == SETTINGS_OVERRIDE_INVALID_FIELD
    assert payload["details"] == {
        "source": str(path),
        "field": "EntryBatchSize",
        "expected_type": "unsigned int",
        "actual_type": "str",
    }
    assert payload["hint"]
    json.dumps(payload)


def test_parse_error_payload(workdir, write_override):
    path = write_override("{")

    with pytest.raises(OverrideParseError) as excinfo:
        load_hard_settings(workdir=workdir)

    payload = excinfo.value.to_payload().to_dict()
    assert payload["type"] == SETTINGS_OVERRIDE_UNREADABLE
    assert payload["details"]["source"] == str(path)
    assert payload["details"]["reason"]
