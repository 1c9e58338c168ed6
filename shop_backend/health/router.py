from fastapi import APIRouter, Request
from shop_backend.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root(request: Request):
    return {"ok": True, "store": getattr(request.app.state, "supabase", None) is not None}

@router.get("/rate-limit")
def health_rate_limit(request: Request):
    return rate_limit_health_info(request)
