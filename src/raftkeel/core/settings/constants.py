# src/raftkeel/core/settings/constants.py
"""
Constantes imutáveis de protocolo e formato do raftkeel.

Estes valores limitam uso de memória e de rede e são apenas referenciados
pelos demais subsistemas. Diferente de `HardSettings`, não podem ser
alterados pelo arquivo de override e não participam do fingerprint.

Este módulo existe para garantir limites de protocolo fixos
e compartilhados por todos os subsistemas.
"""

#
# RSM
#

# Tamanho do header de snapshot, em bytes.
SNAPSHOT_HEADER_SIZE = 1024

#
# transporte
#

# Tamanho máximo do payload de uma proposta.
MAX_PROPOSAL_PAYLOAD_SIZE = 32 * 1024 * 1024
# Tamanho máximo de uma única mensagem trocada entre réplicas. Deve ser
# maior que MAX_PROPOSAL_PAYLOAD_SIZE.
MAX_MESSAGE_SIZE = 2 * MAX_PROPOSAL_PAYLOAD_SIZE + 2 * 1024 * 1024
# Tamanho de cada chunk de snapshot enviado pelo transporte.
SNAPSHOT_CHUNK_SIZE = 2 * 1024 * 1024

#
# bootstrap
#

# Número de ticks lógicos permitidos para o bootstrap completar.
LAUNCH_DEADLINE_TICK = 24

__all__ = [
    "SNAPSHOT_HEADER_SIZE",
    "MAX_PROPOSAL_PAYLOAD_SIZE",
    "MAX_MESSAGE_SIZE",
    "SNAPSHOT_CHUNK_SIZE",
    "LAUNCH_DEADLINE_TICK",
]
