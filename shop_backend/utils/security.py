"""
Portes d'accès des requêtes (dépendances FastAPI).
Ordre garanti par construction: require_admin dépend de get_current_user, donc
l'authentification s'exécute toujours avant l'autorisation et avant la vue.
- get_current_user: porte d'authentification (Bearer JWT) -> claims vérifiés dans request.state.claims
- require_admin: porte d'autorisation, relit le profil à chaque requête (révocation immédiate)
- ensure_owner: variante « propriété » pour les ressources par utilisateur
Toute rejection lève une exception: la vue protégée ne s'exécute jamais.
"""
import logging
from typing import Any, Dict, Optional
from fastapi import Depends, Request
from supabase import Client

from shop_backend.auth import tokens
from shop_backend.config import ADMIN_ROLE
from shop_backend.errors import Forbidden, Unauthorized
from shop_backend.infra.supabase_client import get_db
from shop_backend.users import repository as users_repository

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "

def _bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization") or ""
    if not auth_header.lower().startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None

def get_current_user(request: Request) -> Dict[str, Any]:
    """
    Porte d'authentification.
    - 401 si l'en-tête est absent, n'est pas de schéma Bearer, ou si le jeton est invalide/expiré.
    - Attache les claims vérifiés au contexte de requête; aucun accès BD, aucun log du jeton.
    """
    token = _bearer_token(request)
    if not token:
        raise Unauthorized()
    claims = tokens.verify_token(token)
    request.state.claims = claims
    return claims

def require_user(claims: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return claims

def require_admin(
    claims: Dict[str, Any] = Depends(get_current_user),
    db: Client = Depends(get_db),
) -> Dict[str, Any]:
    """
    Porte d'autorisation (après get_current_user).
    - Claims absents: violation de contrat -> 401 (fail-closed).
    - Profil introuvable ou rôle != admin -> 403.
    - Erreur BD pendant la lecture du profil -> 403 (fail-closed), loggée.
    """
    email = (claims or {}).get("email")
    if not email:
        raise Unauthorized()
    try:
        user = users_repository.get_user_by_email(db, email)
    except Exception:
        logger.exception("security.require_admin: lecture du profil impossible")
        raise Forbidden()
    if not user or user.get("role") != ADMIN_ROLE:
        raise Forbidden()
    return claims

def _email_key(email: Optional[str]) -> str:
    return str(email or "").strip().casefold()

def ensure_owner(requested_email: Optional[str], claims: Dict[str, Any]) -> str:
    """
    Lève Forbidden si l'identité demandée ne correspond pas à l'identité vérifiée.
    - Comparaison insensible à la casse (EmailStr normalise le domaine à l'émission du jeton).
    - Retourne l'email des claims: c'est lui qui sert aux lectures en base.
    """
    owner = (claims or {}).get("email")
    if not _email_key(requested_email) or _email_key(requested_email) != _email_key(owner):
        raise Forbidden()
    return owner
