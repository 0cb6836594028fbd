# src/raftkeel/core/settings/loader.py
"""
Loader canônico do override de hard settings do raftkeel.

Operadores experientes podem sobrescrever os defaults colocando um arquivo
chamado `raftkeel-hard-settings.json` no diretório de trabalho do processo.
Todas as chaves reconhecidas presentes no arquivo substituem o default
correspondente, por exemplo:

    {
      "UseRangeDelete": true,
      "WorkerCount": 32
    }

O processo precisa ser reiniciado para aplicar mudanças. Alterar estes
valores depois que o sistema foi para produção CORROMPE os dados
existentes: decida-os na fase de desenvolvimento e teste.

Política de resolução:
    - Arquivo ausente não é erro: os defaults permanecem
    - Arquivo vazio, ilegível ou com raiz não-objeto (inclusive `null`) é erro fatal
    - Chave reconhecida com valor de tipo incompatível é erro fatal
    - Chaves desconhecidas são ignoradas (compatibilidade com parâmetros
      futuros) e registradas em log como WARNING
    - Apenas as chaves presentes substituem valores; as demais ficam intactas

Invariantes:
    - Todas as chaves são validadas antes de qualquer substituição, então
      uma falha nunca produz um conjunto parcialmente sobrescrito
    - O resultado é sempre uma nova instância de `HardSettings`

Limites explícitos:
    - Lê uma única fonte; não há merge entre múltiplas fontes
    - Não há hot reload: a leitura ocorre uma vez, no startup

Este módulo existe para garantir que overrides do operador sejam
aplicados de forma explícita, atômica e segura.
"""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    InvalidOverrideRootTypeError,
    OverrideFieldTypeError,
    OverrideParseError,
    UnsupportedOverrideFormatError,
)
from .hard import (
    HARD_SETTINGS_FIELDS,
    HardSettings,
    SettingField,
    default_hard_settings,
    field_type_violation,
)

logger = logging.getLogger(__name__)

HARD_SETTINGS_FILENAME = "raftkeel-hard-settings.json"

_FIELDS_BY_KEY = {f.key: f for f in HARD_SETTINGS_FIELDS}


def read_override_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de override e valida sua estrutura básica.

    Formatos suportados (v1):
        - JSON (.json), formato documentado do arquivo padrão
        - YAML (.yaml, .yml)

    Arquivos vazios ou com raiz `null` não são objetos e são rejeitados,
    assim como qualquer falha de leitura de um arquivo presente.

    Args:
        path (Path): Caminho do arquivo de override (deve existir).

    Returns:
        Dict[str, Any]: Conteúdo bruto do arquivo.

    Raises:
        UnsupportedOverrideFormatError: Se a extensão não for suportada.
        OverrideParseError: Se o conteúdo não puder ser interpretado.
        InvalidOverrideRootTypeError: Se a raiz não for um objeto.
    """
    source = str(path)
    suffix = path.suffix.lower()

    if suffix not in {".json", ".yaml", ".yml"}:
        raise UnsupportedOverrideFormatError(
            f"Formato de override não suportado: {path.suffix}", source=source
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise OverrideParseError(
            f"Override {source} não é texto UTF-8 válido: {e}", source=source
        ) from e
    except OSError as e:
        raise OverrideParseError(
            f"Não foi possível ler o override {source}: {e}", source=source
        ) from e

    try:
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise OverrideParseError(
            f"Não foi possível interpretar o override {source}: {e}", source=source
        ) from e

    if not isinstance(data, dict):
        raise InvalidOverrideRootTypeError(
            f"Override {source} deve ser um objeto, recebido: {type(data).__name__}",
            source=source,
        )

    return data


def _coerce_value(field: SettingField, value: Any, source: str) -> Any:
    expected = field_type_violation(field, value)
    if expected is not None:
        raise OverrideFieldTypeError(
            f"Campo '{field.key}' em {source} deve ser {expected}, "
            f"recebido: {value!r} ({type(value).__name__})",
            source=source,
            field=field.key,
            expected_type=expected,
            actual_type=type(value).__name__,
        )
    return value

    # bool é subclasse de int e não é aceito como inteiro
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject("unsigned int")
    if not 0 <= value < _UINT64_LIMIT:
        raise _reject("unsigned int")
    return value


def coerce_overrides(raw: Dict[str, Any], source: str) -> Dict[str, Any]:
    """
    Valida as chaves de um override bruto e converte para atributos de `HardSettings`.

    Decisões arquiteturais:
        - Chaves são case-sensitive
        - Chaves desconhecidas são ignoradas intencionalmente e registradas
          em log; esta é a única tolerância a entrada parcial
        - Nenhuma coerção implícita (ex.: "32" → 32, 1 → True)

    Args:
        raw (Dict[str, Any]): Conteúdo bruto do arquivo de override.
        source (str): Identificação da fonte, usada nas mensagens de erro.

    Returns:
        Dict[str, Any]: Mapa atributo → valor, apenas para chaves reconhecidas.

    Raises:
        OverrideFieldTypeError: Se alguma chave reconhecida tiver valor incompatível.
    """
    changes: Dict[str, Any] = {}

    for key, value in raw.items():
        field = _FIELDS_BY_KEY.get(key)
        if field is None:
            logger.warning("ignorando campo desconhecido '%s' em %s", key, source)
            continue
        changes[field.attr] = _coerce_value(field, value, source)

    return changes


def apply_overrides(
    settings: HardSettings,
    *,
    workdir: Optional[Union[str, Path]] = None,
    filename: str = HARD_SETTINGS_FILENAME,
) -> HardSettings:
    """
    Aplica o arquivo de override, se existir, sobre um conjunto de hard settings.

    O arquivo é procurado em `workdir` (por padrão o diretório de trabalho
    atual). Deve ser chamada uma única vez, de forma síncrona, durante o
    startup e antes de qualquer componente consumir o resultado.

    Args:
        settings (HardSettings): Conjunto de entrada (normalmente os defaults).
        workdir (Optional[Union[str, Path]]): Diretório onde procurar o arquivo.
        filename (str): Nome do arquivo de override.

    Returns:
        HardSettings: `settings` inalterado se o arquivo não existir; caso
        contrário, nova instância com apenas os campos presentes substituídos.

    Raises:
        SettingsError: Qualquer subclasse, se o override for malformado.
    """
    base_dir = Path(workdir) if workdir is not None else Path.cwd()
    path = base_dir / filename

    if not path.exists():
        logger.debug("nenhum override de hard settings em %s", path)
        return settings

    logger.info("lendo override de hard settings em %s", path)
    raw = read_override_file(path)
    changes = coerce_overrides(raw, str(path))

    if changes:
        logger.info(
            "hard settings sobrescritos por %s: %s",
            path,
            ", ".join(f.key for f in HARD_SETTINGS_FIELDS if f.attr in changes),
        )

    return dataclasses.replace(settings, **changes)


def load_hard_settings(
    *,
    workdir: Optional[Union[str, Path]] = None,
    filename: str = HARD_SETTINGS_FILENAME,
) -> HardSettings:
    """
    Resolve o conjunto efetivo de hard settings: defaults + override opcional.

    A aplicação chama esta função uma vez no startup, guarda o resultado e
    o passa explicitamente a todo componente que dele depende. Não existe
    instância global mantida por este módulo.

    Raises:
        SettingsError: Qualquer subclasse, se o override for malformado.
    """
    return apply_overrides(default_hard_settings(), workdir=workdir, filename=filename)
