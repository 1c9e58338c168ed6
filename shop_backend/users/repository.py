"""Couche d’accès aux données (Supabase) pour le domaine Utilisateurs.
Table: users {id, email (unique), name, role}.
Contrairement aux listes publiques, les erreurs BD ne sont pas masquées ici:
la porte d'autorisation décide elle-même de refuser l'accès (fail-closed).
"""
from typing import Any, Dict, List, Optional
import logging
from supabase import Client

logger = logging.getLogger(__name__)

TABLE = "users"

def get_user_by_email(db: Client, email: str) -> Optional[dict]:
    """Récupère un utilisateur par email.
    - Retour: dict utilisateur ou None si introuvable
    """
    if not email:
        return None
    res = db.table(TABLE).select("*").eq("email", email).limit(1).execute()
    rows = res.data or []
    return rows[0] if rows else None

def list_users(db: Client) -> List[Dict[str, Any]]:
    res = db.table(TABLE).select("*").order("email", desc=False).execute()
    return res.data or []

def insert_user(db: Client, user: Dict[str, Any]) -> Optional[dict]:
    """Insère un profil et retourne la ligne créée (ou None si la BD ne la renvoie pas)."""
    res = db.table(TABLE).insert(user).execute()
    rows = res.data or []
    return rows[0] if rows else None

def set_user_role(db: Client, user_id: str, role: str) -> int:
    """Met à jour le rôle d'un utilisateur; retourne le nombre de lignes modifiées."""
    res = db.table(TABLE).update({"role": role}).eq("id", user_id).execute()
    return len(res.data or [])
