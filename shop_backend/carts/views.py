# module shop_backend.carts.views
"""Endpoints Panier.
- GET /carts?email=: panier de l'appelant uniquement (require_user + contrôle de propriété).
- POST /carts: ajout d'un article (public, le propriétaire est l'email du corps).
- DELETE /carts/{id}: suppression limitée aux articles de l'appelant (require_user).
"""
from typing import Any, Dict, Optional
import logging
from fastapi import APIRouter, Depends
from supabase import Client

from shop_backend.infra.supabase_client import get_db
from shop_backend.utils.security import require_user, ensure_owner
from . import repository
from .models import CartItemIn

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/carts", tags=["Carts API"])

@router.get("")
def get_cart(email: Optional[str] = None, claims: Dict[str, Any] = Depends(require_user), db: Client = Depends(get_db)):
    if not email:
        return []
    owner = ensure_owner(email, claims)
    return repository.list_cart(db, owner)

@router.post("")
def add_cart_item(item: CartItemIn, db: Client = Depends(get_db)):
    row = repository.insert_cart_item(db, item.model_dump())
    return {"insertedId": (row or {}).get("id")}

@router.delete("/{item_id}")
def remove_cart_item(item_id: str, claims: Dict[str, Any] = Depends(require_user), db: Client = Depends(get_db)):
    deleted = repository.delete_cart_item(db, item_id, claims["email"])
    return {"deletedCount": deleted}
