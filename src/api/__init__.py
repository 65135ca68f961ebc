"""API — camada de borda do Discord.

Responsabilidades:
- Receber interações (webhook assinado)
- Validar transporte e assinatura Ed25519
- Decodificar o envelope para modelos internos
- Chamar a API REST do Discord

Subpastas:
- connectors/: assinatura, webhook e cliente REST
- normalizers/: payload externo → modelos internos
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: regras de despacho nem lógica de handlers.
"""
