# module shop_backend.admin.views
"""Endpoints d'administration (tous protégés par require_admin).
- /admin-stats: compteurs + chiffre d'affaires
- /order-stats: ventes par catégorie
- /admin/settlements/retry: rejoue les nettoyages de panier en attente après un règlement partiel
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends
from supabase import Client

from shop_backend.infra.supabase_client import get_db
from shop_backend.payments import service as payments_service
from shop_backend.utils.security import require_admin
from . import service as admin_service

router = APIRouter(tags=["Admin"])

@router.get("/admin-stats")
def admin_stats(admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    return admin_service.admin_stats(db)

@router.get("/order-stats")
def order_stats(admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    return admin_service.order_stats(db)

@router.post("/admin/settlements/retry")
def retry_settlement_cleanups(limit: int = 100, admin: Dict[str, Any] = Depends(require_admin), db: Client = Depends(get_db)):
    return payments_service.retry_pending_cleanups(db, limit=limit)
