"""Cliente do Onde Tem?: wrappers da API, store, controllers de formulário.

Camada sem renderização: guarda estado e executa as operações que a
interface dispara.

Subpastas:
- api/: chamadas HTTP tipadas (Ok/Err)
- store/: slices com reducers puros e thunks
- controllers/: formulários de anúncio, usuário e login
- context.py: composição a partir de ClientSettings
"""

from client.api import AdsApi, ApiClient, AuthApi, CommentsApi, FavoritesApi, UsersApi
from client.boundary import ErrorBoundary
from client.context import ClientContext, create_client_context
from client.store import Store, create_store
from client.zipcode import ZipCodeLookup

__all__ = [
    "AdsApi",
    "ApiClient",
    "AuthApi",
    "ClientContext",
    "CommentsApi",
    "ErrorBoundary",
    "FavoritesApi",
    "Store",
    "UsersApi",
    "ZipCodeLookup",
    "create_client_context",
    "create_store",
]
