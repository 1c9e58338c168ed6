from supabase import Client
import logging

logger = logging.getLogger(__name__)

# module shop_backend.admin.repository
def count_table_rows(db: Client, table_name: str) -> int:
    """
    Compte les lignes d'une table via Supabase.
    Utilise count='exact' si disponible, sinon fallback sur len(data).
    """
    res = db.table(table_name).select("id", count="exact").execute()
    if getattr(res, "count", None) is not None:
        return int(res.count)
    return len(res.data or [])
