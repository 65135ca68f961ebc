"""Connectors — adapters de borda para APIs externas.

Estrutura:
- discord/: assinatura de interações, webhook e API REST
"""

__all__: list[str] = []
