"""App — coração do sistema: despacho, continuações e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo de interação (despacho, contexto, continuações)
- domain/: modelos de interação, resposta e comandos
- services/: registro de handlers
- protocols/: contratos/interfaces
- observability/: logs estruturados e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
