"""API — camada de borda HTTP.

Responsabilidades:
- Definir endpoints REST sob /api
- Ler e validar entrada (forms) antes de delegar aos serviços
- Autenticar via bearer token
- Converter erros de domínio em respostas JSON `{"error": ...}`

Subpastas:
- routes/: endpoints por recurso (auth, users, ads, favorites, comments, health)

NÃO PODE conter: SQL, acesso a disco, regras de dono de recurso.
"""
