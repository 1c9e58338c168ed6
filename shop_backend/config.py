# shop_backend.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (Supabase, Stripe, JWT)
- Expose la politique CORS/hosts et la durée de vie des jetons
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Supabase: URL et clés
# - SUPABASE_URL peut parfois être sans schéma: on préfixe en https:// si nécessaire
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "")
# Clé service (bypass RLS) prioritaire pour les opérations serveur
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Jetons d'identité (JWT signés HS256)
# ACCESS_TOKEN_JWT: nom historique de la variable, conservé en alias
ACCESS_TOKEN_SECRET = _clean_env(os.getenv("ACCESS_TOKEN_SECRET") or os.getenv("ACCESS_TOKEN_JWT") or "")
TOKEN_ALGORITHM = _clean_env(os.getenv("TOKEN_ALGORITHM") or "HS256")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "3"))

# Stripe: clé secrète (PAYMENT_SECRET_KEY accepté en alias)
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or os.getenv("PAYMENT_SECRET_KEY") or "")
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "usd").lower()

# Rôles applicatifs
ADMIN_ROLE = "admin"
MEMBER_ROLE = "member"

# Cookies/ Sécurité
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]
