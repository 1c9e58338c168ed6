from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, EmailStr

from shop_backend.utils.rate_limit import optional_rate_limit
from .tokens import issue_token

# --- API Router (/jwt) ---

router = APIRouter(tags=["Auth API"])

class TokenRequest(BaseModel):
    # Les claims supplémentaires (name, photo, ...) sont signés; issue_token retire aud/nbf/iss...
    model_config = ConfigDict(extra="allow")
    email: EmailStr

@router.post("/jwt", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def api_issue_token(req: TokenRequest):
    """Émet un jeton d'accès signé pour les claims fournis.
    - Aucune authentification préalable (le front appelle /jwt après connexion côté fournisseur d'identité).
    - Durée de vie: TOKEN_TTL_HOURS (3h par défaut).
    """
    return {"token": issue_token(req.model_dump())}
