# src/raftkeel/core/settings/hashing.py
"""
Fingerprint canônico dos hard settings do raftkeel.

Este módulo reduz o conjunto efetivo de hard settings a um único inteiro
sem sinal de 64 bits, usado para detectar reconfigurações incompatíveis
com dados já persistidos.

Política de fingerprint (v1):
    - Campos renderizados na ordem de `HARD_SETTINGS_FIELDS`
    - Inteiros em decimal, booleanos como `true` / `false`
    - Campos unidos pelo delimitador `-`
    - Digest MD5 da string codificada em UTF-8
    - Primeiros 8 bytes do digest lidos em little-endian

Decisões arquiteturais:
    - Um digest criptográfico é usado no lugar de um hash rápido: o
      cálculo acontece uma vez no startup, não em caminho quente
    - A codificação textual é fixa e faz parte do formato persistido;
      alterá-la invalida todos os stamps existentes

Invariantes:
    - Conjuntos idênticos campo a campo produzem o mesmo fingerprint
    - O cálculo não depende de estado externo ou ambiente

Limites explícitos:
    - Não decide o que fazer em caso de divergência
    - Não inclui as constantes publicadas em `constants`

Este módulo existe para garantir a detecção confiável de
reconfigurações incompatíveis com o estado persistido.
"""

import hashlib

from .hard import HARD_SETTINGS_FIELDS, HardSettings

FINGERPRINT_DELIMITER = "-"


def _render(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def hard_settings_key(settings: HardSettings) -> str:
    """
    Gera a representação textual estável usada como entrada do digest.

    Para os defaults o resultado é `16-16-false-4096-48`.

    Raises:
        TypeError: Se o objeto fornecido não for `HardSettings`.
    """
    if not isinstance(settings, HardSettings):
        raise TypeError(
            f"Fingerprint requer HardSettings, recebido: {type(settings).__name__}"
        )

    return FINGERPRINT_DELIMITER.join(
        _render(getattr(settings, f.attr)) for f in HARD_SETTINGS_FIELDS
    )


def compute_hard_settings_fingerprint(settings: HardSettings) -> int:
    """
    Calcula o fingerprint de 64 bits do conjunto efetivo de hard settings.

    A função é determinística, pura e não falha em operação normal. Uma
    falha interna do digest é tratada como violação de invariante (assert),
    nunca como erro reportável ao chamador.

    Args:
        settings (HardSettings): Conjunto efetivo de hard settings.

    Returns:
        int: Inteiro sem sinal em [0, 2**64).

    Raises:
        TypeError: Se o objeto fornecido não for `HardSettings`.
    """
    key = hard_settings_key(settings)

    digest = hashlib.md5(key.encode("utf-8")).digest()
    assert len(digest) == 16, "digest MD5 com tamanho inesperado"

    return int.from_bytes(digest[:8], "little")
