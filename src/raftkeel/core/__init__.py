# src/raftkeel/core/__init__.py
"""
Core do raftkeel.

Este pacote reúne a implementação canônica dos hard settings e das
estruturas de rastreabilidade associadas ao seu fingerprint.

Componentes principais:
    - settings     → HardSettings, constantes publicadas, loader de override, hashing
    - traceability → stamps de fingerprint persistidos junto aos dados
    - errors       → catálogo de payloads de erro serializáveis

Princípios fundamentais:
    - Os hard settings são resolvidos uma única vez, antes de qualquer
      componente dependente ser iniciado
    - O valor resolvido é imutável e passado explicitamente aos consumidores
    - Erros de configuração são fatais e nunca silenciados

Limites explícitos:
    - Não decide a política de incompatibilidade (pertence à camada de storage)
    - Não mantém estado global de processo
"""
