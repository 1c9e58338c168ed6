"""
Registre central des routers.
- Auth: /jwt
- Users: /users
- Catalogue: /menu, /menu-stats, /review
- Panier: /carts
- Paiements: /create-payment-intent, /payments
- Admin: /admin-stats, /order-stats, /admin/settlements/retry
- Health: /health
"""
from fastapi import FastAPI
from shop_backend.auth.views import router as auth_router
from shop_backend.users.views import router as users_router
from shop_backend.menu.views import router as menu_router
from shop_backend.carts.views import router as carts_router
from shop_backend.payments.views import router as payments_router
from shop_backend.admin.views import router as admin_router
from shop_backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(menu_router)
    app.include_router(carts_router)
    app.include_router(payments_router)
    app.include_router(admin_router)
    app.include_router(health_router)
