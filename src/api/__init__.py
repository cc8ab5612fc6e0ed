"""API — camada de borda.

Responsabilidades:
- Expor rotas HTTP (auth, vídeos, comentários, respostas, histórico)
- Falar com as APIs do Google (OAuth e YouTube Data API)
- Normalizar payloads externos para modelos internos
- Validar entradas e mapear erros de domínio para respostas HTTP

Subpastas:
- connectors/: clientes HTTP das APIs externas
- normalizers/: payloads externos -> modelos internos
- validators/: validação de entradas
- routes/: endpoints HTTP

NÃO PODE conter: regras de sincronização, ciclo de credenciais ou persistência.
"""
