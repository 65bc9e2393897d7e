"""API — camada de borda HTTP.

Responsabilidades:
- Receber requests e ler headers/corpo
- Validar payloads de endpoints (validators/)
- Traduzir erros tipados em respostas (routes/errors.py)

Subpastas:
- validators/: validação de destino, allow-list e corpo de requisição
- routes/: endpoints HTTP (API de endpoints, health)

NÃO PODE conter: acesso direto a armazenamento ou verificação de token.
"""
