"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import logging
import math
from typing import Any, Dict
import stripe

from shop_backend import config
from shop_backend.errors import InvalidAmount, PaymentProviderError

logger = logging.getLogger(__name__)

# module shop_backend.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l’emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY si disponible.
    - En absence de clé, les appels Stripe échoueront côté SDK (ex: No API key provided).
    """
    if config.STRIPE_SECRET_KEY:
        stripe.api_key = config.STRIPE_SECRET_KEY
    return stripe

def to_minor_units(amount: float) -> int:
    """
    Convertit un montant en unités majeures (ex: dollars) en unités mineures (centimes).
    - Troncature (pas d'arrondi): 19.999 -> 1999, 25.50 -> 2550.
    - Attention: 0.29 * 100 vaut 28.999... en flottant et donne 28.
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise InvalidAmount()
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmount()
    return int(value * 100)

def create_payment_intent(amount: float, currency: str = "usd") -> Dict[str, Any]:
    """
    Crée un PaymentIntent Stripe (carte) et retourne {"clientSecret": ...}.
    - Aucune relance automatique: une création de paiement n'est pas idempotente.
    - Toute erreur Stripe devient PaymentProviderError (message du fournisseur conservé).
    """
    minor = to_minor_units(amount)
    require_stripe()
    try:
        intent = stripe.PaymentIntent.create(
            amount=minor,
            currency=currency,
            payment_method_types=["card"],
        )
    except stripe.StripeError as e:
        logger.warning("stripe.PaymentIntent.create failed amount=%s currency=%s code=%s", minor, currency, getattr(e, "code", None))
        raise PaymentProviderError(getattr(e, "user_message", None) or str(e), provider_code=getattr(e, "code", None))
    return {"clientSecret": intent["client_secret"], "amount": minor}
