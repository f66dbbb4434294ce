"""App — servidor do Onde Tem?: serviços, persistência e composição.

Subpastas:
- bootstrap/: composition root (settings, engine, stores, serviços)
- domain/: entidades e erros de domínio
- services/: regras de negócio (contas, anúncios, favoritos, comentários)
- infra/: implementações concretas de IO (SQL, disco, senhas e tokens)
- protocols/: contratos/interfaces
- observability/: correlação e métricas via logs estruturados

Padrão: app executa; api adapta; forms valida; fsm governa o rascunho.
"""
