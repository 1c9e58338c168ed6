"""
Client Supabase (document store) du backend.
- Le client est construit une seule fois au démarrage (lifespan) et rangé dans app.state.supabase.
- Les vues le reçoivent via la dépendance get_db(), jamais via un singleton de module.
"""
from typing import Optional
import logging
from fastapi import Request, HTTPException
from supabase import create_client, Client
from shop_backend.config import SUPABASE_URL, SUPABASE_KEY, SUPABASE_SERVICE_KEY

logger = logging.getLogger(__name__)

def create_supabase() -> Optional[Client]:
    """
    Crée le client Supabase à partir de la configuration.
    - Utilise la clé service si disponible (opérations serveur, bypass RLS), sinon la clé anon.
    - Retourne None si la configuration est incomplète (l'API répondra 503 sur les routes BD).
    """
    key = SUPABASE_SERVICE_KEY or SUPABASE_KEY
    if not SUPABASE_URL or not key:
        logger.warning("SUPABASE_URL/SUPABASE_KEY manquants: client Supabase non initialisé")
        return None
    return create_client(SUPABASE_URL, key)

def get_db(request: Request) -> Client:
    """Dépendance FastAPI: retourne le client construit au démarrage."""
    client = getattr(request.app.state, "supabase", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Document store indisponible")
    return client
