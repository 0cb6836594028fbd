# src/raftkeel/core/traceability/__init__.py
"""
Rastreabilidade dos hard settings do raftkeel.

Este pacote define os stamps que associam dados persistidos ao fingerprint
dos hard settings usados para gravá-los.
"""

from .stamp import (
    SettingsStamp,
    create_stamp,
    save_stamp,
    load_stamp,
    check_stamp,
)

__all__ = [
    "SettingsStamp",
    "create_stamp",
    "save_stamp",
    "load_stamp",
    "check_stamp",
]
