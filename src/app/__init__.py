"""App — gateway de encaminhamento, infraestrutura e wiring.

Subpastas:
- bootstrap/: composition root (logging, settings, factories de gateway)
- gateway/: ForwardingGateway, modelos e mapeamento de respostas
- infra/: cliente HTTP concreto
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
