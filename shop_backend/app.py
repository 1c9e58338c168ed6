# module shop_backend.app
from fastapi import FastAPI

from shop_backend.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from shop_backend.app_setup.exception_handlers import register_exception_handlers
from shop_backend.app_setup.routes import register_routes
from shop_backend.app_setup.routers import register_routers
from shop_backend.app_setup.lifespan import lifespan as app_lifespan

def create_app() -> FastAPI:
    """
    Crée et configure l’instance FastAPI de l’application.
    Étapes et ordre:
      1) register_basic_middlewares: CORS, TrustedHost.
      2) register_security_middleware: en-têtes de sécurité.
      3) register_exception_handlers: rendu JSON des erreurs HTTP et métier.
      4) register_routes: / et favicon.
      5) register_routers: auth, users, menu, carts, payments, admin, health.
    Le client Supabase et le rate limiter sont construits dans le lifespan.
    """
    app = FastAPI(title="Shop API", lifespan=app_lifespan)
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app

# App globale
app = create_app()
