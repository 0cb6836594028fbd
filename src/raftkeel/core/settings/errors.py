# src/raftkeel/core/settings/errors.py
"""
Exceções canônicas da camada de hard settings do raftkeel.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura e a validação do arquivo de override dos hard settings.

As exceções aqui definidas representam **condições fatais de startup**:
prosseguir com um conjunto de parâmetros parcialmente aplicado ou ambíguo
é exatamente o risco de corrupção que esta camada existe para evitar.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda exceção identifica a fonte (arquivo) que causou a falha
    - Falhas de campo identificam também a chave do override

Invariantes:
    - Todas as exceções de settings herdam de `SettingsError`
    - Toda exceção pode ser convertida em `RaftkeelErrorPayload`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não representa falhas internas do fingerprint (essas são asserções)

Este módulo existe para garantir que falhas de override sejam
claras, tipadas e nunca silenciadas.
"""

from typing import Optional

from ..errors import (
    RaftkeelErrorPayload,
    settings_override_invalid_field,
    settings_override_unreadable,
)


class SettingsError(Exception):
    """
    Exceção base para erros relacionados aos hard settings.

    Guarda o caminho do arquivo de override (`source`) para que a falha
    de startup indique claramente qual fonte deve ser corrigida.
    """

    def __init__(self, message: str, *, source: str, field: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.field = field

    def to_payload(self) -> RaftkeelErrorPayload:
        return settings_override_unreadable(source=self.source, reason=str(self))


class UnsupportedOverrideFormatError(SettingsError):
    """
    Exceção levantada quando a extensão do arquivo de override não é suportada.

    Formatos suportados (v1):
        - JSON (.json)
        - YAML (.yaml, .yml)
    """


class OverrideParseError(SettingsError):
    """
    Exceção levantada quando o arquivo de override existe mas não pode
    ser interpretado como documento estruturado.

    Decisões arquiteturais:
        - Um arquivo malformado nunca é ignorado
        - Nenhum campo é aplicado quando o parse falha
    """


class InvalidOverrideRootTypeError(SettingsError):
    """
    Exceção levantada quando o conteúdo raiz do override não é um objeto
    (mapa chave-valor).
    """


class OverrideFieldTypeError(SettingsError):
    """
    Exceção levantada quando uma chave reconhecida do override possui um
    valor que não pode ser convertido para o tipo esperado.

    Exemplo de conflito:
        - {"WorkerCount": "32"}      → string no lugar de inteiro
        - {"UseRangeDelete": 1}      → inteiro no lugar de booleano
        - {"EntryBatchSize": -1}     → inteiro fora da faixa sem sinal

    Invariantes:
        - Nenhum override parcial é produzido em caso de conflito
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        field: str,
        expected_type: str,
        actual_type: str,
    ):
        super().__init__(message, source=source, field=field)
        self.expected_type = expected_type
        self.actual_type = actual_type

    def to_payload(self) -> RaftkeelErrorPayload:
        return settings_override_invalid_field(
            source=self.source,
            field=self.field,
            expected_type=self.expected_type,
            actual_type=self.actual_type,
        )
