"""App — orquestração, serviços e infraestrutura do registro de endpoints.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos Endpoint, destinos e Principal
- services/: AuthGate e EndpointService
- infra/: Firestore, memória e Firebase Auth
- protocols/: contratos/interfaces
- observability/: correlation_id, principal e log de acesso

Padrão: app executa; api adapta; config configura; utils apoia.
"""
