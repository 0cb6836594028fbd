# src/raftkeel/core/settings/hard.py
"""
Hard settings do raftkeel.

Hard settings são parâmetros que determinam o layout dos dados em disco e
o esquema de particionamento do log de consenso. Eles **nunca** devem ser
alterados depois que um deploy persistiu dados: qualquer mudança torna o
estado existente ilegível ou semanticamente inconsistente com o estado
gravado a partir de então.

Este módulo define:
    - `HardSettings`: o conjunto efetivo de parâmetros (imutável)
    - `HARD_SETTINGS_FIELDS`: a tabela ordenada de campos, usada pelo
      loader de override e pelo fingerprint
    - `default_hard_settings`: o provedor de defaults

Decisões arquiteturais:
    - O conjunto é um dataclass congelado; overrides produzem nova instância
    - Os nomes de chave do arquivo de override são case-sensitive e
      diferem dos atributos Python (ex.: `WorkerCount` → `worker_count`)
    - A ordem de `HARD_SETTINGS_FIELDS` é parte do formato do fingerprint

Invariantes:
    - Todo campo possui default não vazio e autoconsistente
    - Nenhuma instância é mutada após a construção

Limites explícitos:
    - Não lê arquivos (ver `loader`)
    - Não valida faixas de valor além do tipo

Este módulo existe para garantir uma única definição,
imutável e validada, dos parâmetros que moldam os dados em disco.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

_UINT64_LIMIT = 2 ** 64


@dataclass(frozen=True)
class SettingField:
    """Descreve um campo de `HardSettings` como aparece no arquivo de override."""

    key: str
    attr: str
    kind: type


HARD_SETTINGS_FIELDS: Tuple[SettingField, ...] = (
    SettingField(key="WorkerCount", attr="worker_count", kind=int),
    SettingField(key="StorePoolSize", attr="store_pool_size", kind=int),
    SettingField(key="UseRangeDelete", attr="use_range_delete", kind=bool),
    SettingField(key="MaxCachedSessions", attr="max_cached_sessions", kind=int),
    SettingField(key="EntryBatchSize", attr="entry_batch_size", kind=int),
)


def field_type_violation(field: SettingField, value: Any) -> Optional[str]:
    """
    Verifica se `value` é aceitável para `field`.

    Inteiros devem ser `int` em [0, 2**64) e nunca `bool`; booleanos
    devem ser `bool`. Nenhuma coerção é aplicada.

    Returns:
        Optional[str]: `None` se o valor é válido; caso contrário, o nome
        do tipo esperado (`"bool"` ou `"unsigned int"`).
    """
    if field.kind is bool:
        return None if isinstance(value, bool) else "bool"

    # bool é subclasse de int e não é aceito como inteiro
    if isinstance(value, bool) or not isinstance(value, int):
        return "unsigned int"
    if not 0 <= value < _UINT64_LIMIT:
        return "unsigned int"
    return None


@dataclass(frozen=True)
class HardSettings:
    """
    Conjunto efetivo de hard settings de um processo.

    Campos:
        worker_count: número de workers que particionam as máquinas de
            estado replicadas para processamento. Também determina como os
            grupos são distribuídos entre caches de entradas e instâncias
            do storage.
        store_pool_size: número de instâncias independentes do storage
            engine, permitindo espalhar a persistência do log entre discos.
        use_range_delete: se range delete e compactação manual são usados
            para remover em lote entradas de log obsoletas.
        max_cached_sessions: limite de sessões de cliente mantidas
            simultaneamente por grupo replicado.
        entry_batch_size: número máximo de entradas agrupadas em um batch
            persistido.

    Invariantes:
        - Instâncias são imutáveis e seguras para leitura concorrente
        - Todo campo é validado na construção (ver `field_type_violation`)
        - Existe exatamente uma instância efetiva por processo, criada pela
          aplicação durante o startup e passada explicitamente adiante
    """

    worker_count: int
    store_pool_size: int
    use_range_delete: bool
    max_cached_sessions: int
    entry_batch_size: int

    def __post_init__(self) -> None:
        for f in HARD_SETTINGS_FIELDS:
            value = getattr(self, f.attr)
            expected = field_type_violation(f, value)
            if expected is not None:
                raise TypeError(
                    f"HardSettings.{f.attr} deve ser {expected}, "
                    f"recebido: {value!r} ({type(value).__name__})"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Retorna o conjunto indexado pelas chaves do arquivo de override."""
        return {f.key: getattr(self, f.attr) for f in HARD_SETTINGS_FIELDS}

    def fingerprint(self) -> int:
        from .hashing import compute_hard_settings_fingerprint

        return compute_hard_settings_fingerprint(self)


def default_hard_settings() -> HardSettings:
    """
    Retorna o conjunto baseline de hard settings.

    Justificativa dos valores:
        - 16 workers e 16 instâncias de storage atendem deploys típicos
          com múltiplos discos
        - range delete fica desabilitado porque o recurso subjacente do
          storage engine é considerado experimental
        - os limites de sessões em cache e de tamanho de batch limitam o
          uso de memória cobrindo as cargas de trabalho comuns

    Esta função é pura: não recebe entradas, não produz efeitos colaterais
    e sempre retorna os mesmos valores.
    """
    return HardSettings(
        worker_count=16,
        store_pool_size=16,
        use_range_delete=False,
        max_cached_sessions=4096,
        entry_batch_size=48,
    )
