"""
Cas d'usage 'payments': règlement d'un paiement confirmé contre le panier du payeur.

Ordre imposé par settle_payment:
  0) résolution des articles demandés appartenant au payeur (seuls ceux-ci sont enregistrés)
  1) insertion du paiement (priorité à la durabilité; échec -> SettlementFailed, panier intact)
  2) suppression des articles de panier référencés ET appartenant au payeur
  3) retour combiné {paymentRecordId, removedCartItemIds, ...}
Si 2) échoue, le paiement reste enregistré et une entrée 'pending' est écrite dans
settlement_cleanups; retry_pending_cleanups() rejoue la suppression sans réinsérer le paiement.
"""
from typing import Any, Dict, List
import logging
from supabase import Client

from shop_backend.carts import repository as carts_repository
from shop_backend.errors import SettlementFailed
from . import repository

logger = logging.getLogger(__name__)

def _payment_record(payer_email: str, payment: Dict[str, Any], owned_ids: List[str]) -> Dict[str, Any]:
    record = {
        "email": payer_email,
        "price": payment["price"],
        "cart_item_ids": owned_ids,
        "menu_item_ids": [str(i) for i in payment.get("menu_items") or []],
        "transaction_id": payment["transaction_id"],
    }
    for key in ("quantity", "status", "item_names"):
        if payment.get(key) is not None:
            record[key] = payment[key]
    return record

def settle_payment(db: Client, payer_email: str, payment: Dict[str, Any]) -> Dict[str, Any]:
    """
    Enregistre le paiement puis retire du panier les articles payés.
    - payer_email: issu des claims vérifiés (jamais du corps de requête).
    - payment: PaymentIn.model_dump() (clés snake_case).
    Un article déjà retiré (règlement concurrent ou rejoué) ou appartenant à un autre
    utilisateur n'est ni enregistré dans le paiement ni supprimé.
    """
    try:
        owned = carts_repository.list_owned_cart_item_ids(db, payment["cart_items"], payer_email)
        record = _payment_record(payer_email, payment, owned)
        row = repository.insert_payment(db, record)
    except Exception:
        logger.exception("payments.settle insert failed email=%s transaction_id=%s", payer_email, payment["transaction_id"])
        raise SettlementFailed()

    payment_id = str(row["id"])
    requested: List[str] = record["cart_item_ids"]
    try:
        removed = carts_repository.delete_cart_items(db, requested, payer_email)
    except Exception as e:
        logger.exception("payments.settle cart cleanup failed payment_id=%s", payment_id)
        try:
            repository.insert_cleanup(db, payment_id=payment_id, email=payer_email, cart_item_ids=requested, error=str(e))
        except Exception:
            # Paiement conservé; réconciliation manuelle à partir de ce log
            logger.exception("payments.settle cleanup log failed payment_id=%s cart_item_ids=%s", payment_id, requested)
        return {
            "paymentRecordId": payment_id,
            "insertedId": payment_id,
            "removedCartItemIds": [],
            "deletedCount": 0,
            "cleanupPending": True,
        }

    if len(removed) < len(requested):
        logger.info("payments.settle partial removal payment_id=%s requested=%s removed=%s", payment_id, len(requested), len(removed))
    logger.info("payments.settle ok payment_id=%s removed=%s email=%s", payment_id, len(removed), payer_email)
    return {
        "paymentRecordId": payment_id,
        "insertedId": payment_id,
        "removedCartItemIds": removed,
        "deletedCount": len(removed),
        "cleanupPending": False,
    }

def retry_pending_cleanups(db: Client, limit: int = 100) -> Dict[str, int]:
    """
    Rejoue les nettoyages de panier en attente.
    - Succès: l'entrée passe à 'done'. Échec: last_error est mis à jour, l'entrée reste 'pending'.
    """
    pending = repository.list_pending_cleanups(db, limit=limit)
    completed = 0
    for entry in pending:
        try:
            carts_repository.delete_cart_items(db, entry.get("cart_item_ids") or [], entry.get("email") or "")
        except Exception as e:
            logger.exception("payments.retry_cleanup failed cleanup_id=%s", entry.get("id"))
            repository.update_cleanup(db, entry["id"], {"last_error": str(e)})
            continue
        repository.update_cleanup(db, entry["id"], {"status": repository.CLEANUP_DONE, "last_error": None})
        completed += 1
    return {"retried": len(pending), "completed": completed}
