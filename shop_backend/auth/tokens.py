"""
Service de jetons d'identité (JWT HS256).
- issue_token: signe les claims fournis + iat/exp avec le secret du process.
- verify_token: vérifie signature, format et expiration; aucune confiance partielle.
Aucun état: fonction pure du secret et de l'horloge.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import jwt

from shop_backend import config
from shop_backend.errors import InvalidClaims, Unauthorized

# Claims enregistrés (RFC 7519): fixés par le serveur, jamais repris du client
RESERVED_CLAIMS = ("iss", "sub", "aud", "exp", "nbf", "iat", "jti")

# module shop_backend.auth.tokens
def _secret() -> str:
    if not config.ACCESS_TOKEN_SECRET:
        raise RuntimeError("ACCESS_TOKEN_SECRET manquant pour signer/vérifier les jetons")
    return config.ACCESS_TOKEN_SECRET

def issue_token(claims: Dict[str, Any], now: Optional[datetime] = None) -> str:
    """
    Émet un jeton signé pour les claims donnés.
    - Exige un claim email non vide, sinon InvalidClaims.
    - Retire les claims enregistrés fournis par le client (aud, nbf, iss...).
    - Ajoute iat et exp (iat + TOKEN_TTL_HOURS).
    """
    email = str((claims or {}).get("email") or "").strip()
    if not email:
        raise InvalidClaims()
    issued_at = now or datetime.now(timezone.utc)
    payload = {k: v for k, v in claims.items() if k not in RESERVED_CLAIMS}
    payload["email"] = email
    payload["iat"] = issued_at
    payload["exp"] = issued_at + timedelta(hours=config.TOKEN_TTL_HOURS)
    return jwt.encode(payload, _secret(), algorithm=config.TOKEN_ALGORITHM)

def verify_token(token: str) -> Dict[str, Any]:
    """
    Vérifie un jeton et retourne ses claims.
    - Unauthorized si signature invalide, jeton mal formé, expiré ou sans email.
    """
    if not token:
        raise Unauthorized()
    try:
        claims = jwt.decode(
            token,
            _secret(),
            algorithms=[config.TOKEN_ALGORITHM],
            options={"require": ["exp", "email"]},
        )
    except jwt.PyJWTError:
        raise Unauthorized()
    if not str(claims.get("email") or "").strip():
        raise Unauthorized()
    return claims
