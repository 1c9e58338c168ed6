"""
Accès aux données pour la feature 'payments'.
- payments: enregistrements de paiement (immuables une fois créés)
- settlement_cleanups: journal des nettoyages de panier à rejouer après un échec partiel
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging
from supabase import Client

logger = logging.getLogger(__name__)

PAYMENTS_TABLE = "payments"
CLEANUPS_TABLE = "settlement_cleanups"

CLEANUP_PENDING = "pending"
CLEANUP_DONE = "done"

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

# module shop_backend.payments.repository
def insert_payment(db: Client, record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insère un paiement et retourne la ligne créée (avec son id).
    Lève une exception si la BD ne confirme pas l'insertion.
    """
    payload = dict(record)
    payload.setdefault("created_at", _now_iso())
    res = db.table(PAYMENTS_TABLE).insert(payload).execute()
    rows = res.data or []
    if not rows or not rows[0].get("id"):
        raise RuntimeError("payments insert returned no row")
    return rows[0]

def list_payment_prices(db: Client) -> List[Any]:
    res = db.table(PAYMENTS_TABLE).select("price").execute()
    return [row.get("price") for row in (res.data or [])]

def list_payment_menu_refs(db: Client) -> List[List[str]]:
    """Retourne, pour chaque paiement, la liste des menu_item_ids référencés."""
    res = db.table(PAYMENTS_TABLE).select("menu_item_ids").execute()
    return [list(row.get("menu_item_ids") or []) for row in (res.data or [])]

def insert_cleanup(db: Client, *, payment_id: str, email: str, cart_item_ids: List[str], error: str) -> Optional[dict]:
    res = (
        db.table(CLEANUPS_TABLE)
        .insert({
            "payment_id": payment_id,
            "email": email,
            "cart_item_ids": cart_item_ids,
            "status": CLEANUP_PENDING,
            "last_error": error,
            "created_at": _now_iso(),
        })
        .execute()
    )
    rows = res.data or []
    return rows[0] if rows else None

def list_pending_cleanups(db: Client, limit: int = 100) -> List[Dict[str, Any]]:
    res = (
        db.table(CLEANUPS_TABLE)
        .select("*")
        .eq("status", CLEANUP_PENDING)
        .order("created_at", desc=False)
        .limit(limit)
        .execute()
    )
    return res.data or []

def update_cleanup(db: Client, cleanup_id: str, data: Dict[str, Any]) -> None:
    db.table(CLEANUPS_TABLE).update(data).eq("id", cleanup_id).execute()
