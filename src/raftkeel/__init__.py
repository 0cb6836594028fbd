# src/raftkeel/__init__.py
"""
raftkeel — núcleo de hard settings para um motor de máquinas de estado replicadas.

Este pacote raiz define o namespace público do raftkeel. Ele fornece os
parâmetros "hard" que determinam o layout em disco e o particionamento do
log de consenso, além de um fingerprint estável desses parâmetros.

Arquitetura em alto nível:
    - core.settings     → defaults, override por arquivo e fingerprint
    - core.traceability → stamps de fingerprint para diretórios de dados
    - core.errors       → payloads canônicos de erro

Limites explícitos:
    - Não implementa log store, transporte ou runtime de máquina de estados
    - Não contém settings "soft" (alteráveis entre execuções)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
