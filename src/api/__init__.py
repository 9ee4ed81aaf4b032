"""API — camada de borda: rotas HTTP e conectores por upstream.

Subpastas:
- connectors/: ForwardSpecs da Evolution API e do Serper
- validators/: extração e validação de campos da requisição
- routes/: endpoints HTTP (gateway, health)

NÃO PODE conter: chamadas HTTP diretas nem regras de timeout.
"""
