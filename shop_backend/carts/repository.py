"""
Accès aux données pour la feature 'carts'.
Table: carts {id, email (propriétaire), menu_item_id, name, image, price}.
Les suppressions sont toujours filtrées sur le propriétaire.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging
from supabase import Client

logger = logging.getLogger(__name__)

TABLE = "carts"

# module shop_backend.carts.repository
def list_cart(db: Client, email: str) -> List[Dict[str, Any]]:
    if not email:
        return []
    res = db.table(TABLE).select("*").eq("email", email).execute()
    return res.data or []

def insert_cart_item(db: Client, item: Dict[str, Any]) -> Optional[dict]:
    res = db.table(TABLE).insert(item).execute()
    rows = res.data or []
    return rows[0] if rows else None

def list_owned_cart_item_ids(db: Client, item_ids: Iterable[str], owner_email: str) -> List[str]:
    """Parmi item_ids, retourne (dans l'ordre demandé) ceux qui existent et appartiennent à owner_email."""
    ids = [str(i) for i in item_ids if i]
    if not ids:
        return []
    res = db.table(TABLE).select("id").in_("id", ids).eq("email", owner_email).execute()
    owned = {str(row.get("id")) for row in (res.data or [])}
    return [i for i in ids if i in owned]

def delete_cart_item(db: Client, item_id: str, owner_email: str) -> int:
    res = db.table(TABLE).delete().eq("id", item_id).eq("email", owner_email).execute()
    return len(res.data or [])

def delete_cart_items(db: Client, item_ids: Iterable[str], owner_email: str) -> List[str]:
    """
    Supprime en une requête les articles listés appartenant à owner_email.
    Retourne les ids effectivement supprimés (les ids déjà absents sont ignorés).
    """
    ids = [str(i) for i in item_ids if i]
    if not ids:
        return []
    res = (
        db.table(TABLE)
        .delete()
        .in_("id", ids)
        .eq("email", owner_email)
        .execute()
    )
    return [str(row.get("id")) for row in (res.data or [])]
