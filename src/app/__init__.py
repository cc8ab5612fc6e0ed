"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: entidades (credencial, conta, comentário, interação, modelos de IA)
- use_cases/: casos de uso (autenticação de conta)
- services/: serviços de aplicação (credenciais, respostas, ledger, IA)
- sync/: paginação e sincronização de comentários/vídeos
- infra/: implementações concretas de IO (stores, crypto, OpenAI)
- protocols/: contratos/interfaces
- sessions/: modelos e gerenciador de sessão
- observability/: correlation id e métricas via logs

Padrão: app executa; api adapta; ai formata prompts; utils apoia.
"""
