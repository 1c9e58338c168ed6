"""
Gestionnaire d’exceptions de l'API.
- Les erreurs métier (shop_backend.errors) sont des HTTPException: même rendu JSON {"error": true, "detail": ...}.
- Enregistré sur l'HTTPException Starlette: couvre aussi les 404/405 du routage.
- Les en-têtes portés par l'exception (ex: WWW-Authenticate sur 401) sont conservés.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def json_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": True, "detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
