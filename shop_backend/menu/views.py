# module shop_backend.menu.views
from typing import Any, Dict
from fastapi import APIRouter, Depends
from supabase import Client

from shop_backend.admin import repository as admin_repository
from shop_backend.errors import NotFound
from shop_backend.infra.supabase_client import get_db
from shop_backend.utils.security import require_user, require_admin
from . import repository
from .models import MenuItemIn

router = APIRouter(tags=["Menu API"])

@router.get("/menu")
def list_menu(db: Client = Depends(get_db)):
    return repository.list_menu(db)

@router.post("/menu")
def create_menu_item(item: MenuItemIn, admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    row = repository.insert_menu_item(db, item.model_dump())
    return {"insertedId": (row or {}).get("id")}

@router.delete("/menu/{item_id}")
def delete_menu_item(item_id: str, admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    deleted = repository.delete_menu_item(db, item_id)
    if not deleted:
        raise NotFound("menu item not found")
    return {"deletedCount": deleted}

@router.get("/menu-stats")
def menu_stats(claims: Dict[str, Any] = Depends(require_user), db: Client = Depends(get_db)):
    """Compteurs publics pour un utilisateur connecté: articles du menu et commandes."""
    return {
        "products": admin_repository.count_table_rows(db, "menu"),
        "orders": admin_repository.count_table_rows(db, "payments"),
    }

@router.get("/review")
def list_reviews(db: Client = Depends(get_db)):
    return repository.list_reviews(db)
