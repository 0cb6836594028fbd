# tests/conftest.py
"""
Fixtures compartilhados para testes do raftkeel.

Este módulo define fixtures reutilizáveis que fornecem:
- um diretório de trabalho isolado para o arquivo de override
- um escritor de arquivos de override (JSON ou texto bruto)

Decisões arquiteturais:
    - Cada teste recebe seu próprio diretório (`tmp_path`), nunca o cwd real
    - Nenhuma fixture depende de instância global de HardSettings

Limites explícitos:
    - Não validar comportamento do loader ou do fingerprint
"""

import json

import pytest


@pytest.fixture
def workdir(tmp_path):
    """Diretório de trabalho isolado onde o arquivo de override é procurado."""
    return tmp_path


@pytest.fixture
def write_override(workdir):
    """
    Fixture factory que grava um arquivo de override no diretório de trabalho.

    Aceita um dicionário (serializado em JSON) ou uma string gravada sem
    alteração, permitindo simular arquivos malformados.

    Returns:
        Callable: função `(content, filename=HARD_SETTINGS_FILENAME) -> Path`.
    """
    from raftkeel.core.settings.loader import HARD_SETTINGS_FILENAME

    def _write(content, filename=HARD_SETTINGS_FILENAME):
        path = workdir / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
