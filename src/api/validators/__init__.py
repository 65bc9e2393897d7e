"""Validators — validação de payloads recebidos pela API.

Estrutura:
- endpoints/: create/update de endpoints de notificação

Cada domínio tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
