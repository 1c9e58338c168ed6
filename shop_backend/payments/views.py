import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from supabase import Client

from shop_backend.config import PAYMENT_CURRENCY
from shop_backend.infra.supabase_client import get_db
from shop_backend.utils.rate_limit import optional_rate_limit
from shop_backend.utils.security import require_user
from . import service, stripe_client
from .models import IntentRequest, PaymentIn

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments API"])

# module shop_backend.payments.views
@router.post("/create-payment-intent", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_payment_intent(body: IntentRequest, claims: Dict[str, Any] = Depends(require_user)):
    """
    Crée un PaymentIntent Stripe pour le montant du panier.
    - Entrée JSON: { "price": <float, unités majeures> }
    - Sécurité: require_user + rate limit (10 req / 60s)
    - Erreurs: 400 montant invalide, 502 si Stripe refuse (message transmis tel quel)
    """
    return stripe_client.create_payment_intent(body.price, currency=PAYMENT_CURRENCY)

@router.post("/payments")
def create_payment(body: PaymentIn, claims: Dict[str, Any] = Depends(require_user), db: Client = Depends(get_db)):
    """
    Règle un paiement confirmé: enregistrement puis retrait des articles du panier.
    - Le payeur est l'email des claims vérifiés.
    - Réponse: {paymentRecordId, insertedId, removedCartItemIds, deletedCount, cleanupPending}
    - Erreurs: 422 payload invalide, 500 si le paiement n'a pas pu être enregistré
    """
    return service.settle_payment(db, claims["email"], body.model_dump())
