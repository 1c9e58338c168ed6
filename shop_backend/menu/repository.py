"""Couche d’accès aux données (Supabase) pour le catalogue: menu et avis.
Les listes publiques sont « catchées » et renvoient [] en cas d'erreur afin de ne pas casser l'UX.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging
from supabase import Client

logger = logging.getLogger(__name__)

MENU_TABLE = "menu"
REVIEWS_TABLE = "reviews"

def list_menu(db: Client) -> List[Dict[str, Any]]:
    """Liste les articles du menu (table menu)."""
    try:
        res = db.table(MENU_TABLE).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("menu.repository.list_menu failed")
        return []

def list_reviews(db: Client) -> List[Dict[str, Any]]:
    try:
        res = db.table(REVIEWS_TABLE).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("menu.repository.list_reviews failed")
        return []

def fetch_menu_by_ids(db: Client, ids: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Récupère les articles par leurs IDs.
    - Utilisé par les statistiques de commandes: les erreurs remontent à l'appelant.
    """
    id_list = sorted({str(i) for i in ids if i})
    if not id_list:
        return []
    res = db.table(MENU_TABLE).select("id, category, price").in_("id", id_list).execute()
    return res.data or []

def insert_menu_item(db: Client, item: Dict[str, Any]) -> Optional[dict]:
    res = db.table(MENU_TABLE).insert(item).execute()
    rows = res.data or []
    return rows[0] if rows else None

def delete_menu_item(db: Client, item_id: str) -> int:
    res = db.table(MENU_TABLE).delete().eq("id", item_id).execute()
    return len(res.data or [])
