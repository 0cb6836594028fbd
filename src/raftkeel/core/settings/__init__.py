# src/raftkeel/core/settings/__init__.py
"""
Camada de hard settings do raftkeel.

Este pacote contém as estruturas e utilitários responsáveis por fornecer
os defaults, aplicar o override opcional do operador e identificar o
conjunto efetivo por meio de um fingerprint.

Responsabilidades do pacote:
    - Defaults dos hard settings (`hard`)
    - Leitura e validação do arquivo de override (`loader`)
    - Fingerprint de 64 bits do conjunto efetivo (`hashing`)
    - Constantes imutáveis de protocolo e formato (`constants`)

Invariantes:
    - O conjunto efetivo é resolvido uma vez, antes do uso concorrente
    - O conjunto efetivo é imutável
    - Override malformado é sempre erro fatal

Este pacote existe para garantir que o layout persistido seja
determinado por um conjunto de parâmetros previsível e rastreável.
"""

from .constants import (
    LAUNCH_DEADLINE_TICK,
    MAX_MESSAGE_SIZE,
    MAX_PROPOSAL_PAYLOAD_SIZE,
    SNAPSHOT_CHUNK_SIZE,
    SNAPSHOT_HEADER_SIZE,
)
from .errors import (
    InvalidOverrideRootTypeError,
    OverrideFieldTypeError,
    OverrideParseError,
    SettingsError,
    UnsupportedOverrideFormatError,
)
from .hard import HARD_SETTINGS_FIELDS, HardSettings, default_hard_settings
from .hashing import compute_hard_settings_fingerprint, hard_settings_key
from .loader import (
    HARD_SETTINGS_FILENAME,
    apply_overrides,
    load_hard_settings,
    read_override_file,
)

__all__ = [
    "HARD_SETTINGS_FIELDS",
    "HARD_SETTINGS_FILENAME",
    "HardSettings",
    "default_hard_settings",
    "apply_overrides",
    "load_hard_settings",
    "read_override_file",
    "compute_hard_settings_fingerprint",
    "hard_settings_key",
    "SettingsError",
    "UnsupportedOverrideFormatError",
    "OverrideParseError",
    "InvalidOverrideRootTypeError",
    "OverrideFieldTypeError",
    "SNAPSHOT_HEADER_SIZE",
    "MAX_PROPOSAL_PAYLOAD_SIZE",
    "MAX_MESSAGE_SIZE",
    "SNAPSHOT_CHUNK_SIZE",
    "LAUNCH_DEADLINE_TICK",
]
