# module shop_backend.users.service
"""Couche service du domaine Utilisateurs.
- Inscription idempotente sur l'email (un doublon est signalé, jamais inséré).
- Attribution du rôle admin, uniquement via une opération explicite.
"""
from typing import Any, Dict
import logging
from supabase import Client

from shop_backend.config import ADMIN_ROLE, MEMBER_ROLE
from shop_backend.errors import NotFound
from . import repository

logger = logging.getLogger(__name__)

def register_user(db: Client, user: Dict[str, Any]) -> Dict[str, Any]:
    """Crée le profil si l'email est inconnu.
    - Le rôle n'est jamais accepté depuis le corps: tout nouveau profil est « member ».
    - Email déjà présent: retourne le message de conflit sans insertion.
    """
    if repository.get_user_by_email(db, user["email"]):
        return {"message": "User Already Exists", "insertedId": None}
    payload = {k: v for k, v in user.items() if v is not None and k != "role"}
    payload["role"] = MEMBER_ROLE
    row = repository.insert_user(db, payload)
    logger.info("users.register created email=%s", user["email"])
    return {"insertedId": (row or {}).get("id")}

def grant_admin(db: Client, user_id: str) -> Dict[str, Any]:
    modified = repository.set_user_role(db, user_id, ADMIN_ROLE)
    if not modified:
        raise NotFound("user not found")
    logger.info("users.grant_admin id=%s", user_id)
    return {"modifiedCount": modified}

def is_admin(db: Client, email: str) -> bool:
    user = repository.get_user_by_email(db, email)
    return (user or {}).get("role") == ADMIN_ROLE
