# module shop_backend.users.views
"""Endpoints Utilisateurs.
- POST /users: inscription idempotente (publique).
- GET /users: liste complète (admin).
- PATCH /users/admin/{id}: attribution du rôle admin (admin).
- GET /users/admin/{email}: drapeau admin de l'appelant (propriétaire uniquement).
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends
from supabase import Client

from shop_backend.infra.supabase_client import get_db
from shop_backend.utils.security import require_user, require_admin, ensure_owner
from . import repository, service
from .models import UserIn

router = APIRouter(prefix="/users", tags=["Users API"])

@router.post("")
def create_user(user: UserIn, db: Client = Depends(get_db)):
    return service.register_user(db, user.model_dump())

@router.get("")
def list_users(admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    return repository.list_users(db)

@router.patch("/admin/{user_id}")
def make_admin(user_id: str, admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    """Promotion admin: protégée par require_admin (l'appelant doit déjà être admin)."""
    return service.grant_admin(db, user_id)

@router.get("/admin/{email}")
def check_admin(email: str, claims: Dict[str, Any] = Depends(require_user), db: Client = Depends(get_db)):
    owner = ensure_owner(email, claims)
    return {"admin": service.is_admin(db, owner)}
