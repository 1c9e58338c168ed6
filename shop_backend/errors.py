"""
Taxonomie des erreurs du backend.
Chaque erreur est une HTTPException: FastAPI la convertit directement en réponse
JSON {"error": true, "detail": ...} via le handler enregistré dans app_setup.exception_handlers.
"""
from typing import Optional
from fastapi import HTTPException


class Unauthorized(HTTPException):
    """Jeton absent, invalide ou expiré (401)."""
    def __init__(self, detail: str = "unauthorized access"):
        super().__init__(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(HTTPException):
    """Identité valide mais privilège ou propriété insuffisant (403)."""
    def __init__(self, detail: str = "forbidden access"):
        super().__init__(status_code=403, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "not found"):
        super().__init__(status_code=404, detail=detail)


class InvalidClaims(HTTPException):
    """Claims refusés à l'émission d'un jeton (email manquant)."""
    def __init__(self, detail: str = "email claim required"):
        super().__init__(status_code=400, detail=detail)


class PaymentProviderError(HTTPException):
    """
    Échec de l'appel au fournisseur de paiement.
    Le message du fournisseur est transmis tel quel au client, sans retry automatique.
    """
    def __init__(self, detail: str, provider_code: Optional[str] = None):
        super().__init__(status_code=502, detail=detail)
        self.provider_code = provider_code


class SettlementFailed(HTTPException):
    """Échec de l'enregistrement du paiement: aucun article de panier n'a été touché."""
    def __init__(self, detail: str = "payment could not be recorded"):
        super().__init__(status_code=500, detail=detail)


class InvalidAmount(HTTPException):
    """Montant de paiement non numérique, non fini ou négatif/nul (400)."""
    def __init__(self, detail: str = "Montant invalide"):
        super().__init__(status_code=400, detail=detail)
