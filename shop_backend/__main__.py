"""
Point d'entrée principal pour le backend FastAPI.

Usage:
    python -m shop_backend

Variables d'environnement lues:
- PORT: port d'écoute (par défaut 4000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
"""
import uvicorn
import os

def main() -> None:
    port = int(os.environ.get("PORT", 4000))
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    log_level = os.environ.get("LOG_LEVEL", "info")
    uvicorn.run(
        "shop_backend.asgi:app",
        host="0.0.0.0",
        port=port,
        reload=reload_flag,
        log_level=log_level
    )

if __name__ == "__main__":
    main()
