# module shop_backend.admin.service

from collections import defaultdict
from typing import Any, Dict, List
import logging
import math
from supabase import Client

from shop_backend.menu import repository as menu_repository
from shop_backend.payments import repository as payments_repository
from . import repository as admin_repository

logger = logging.getLogger(__name__)

def admin_stats(db: Client) -> Dict[str, Any]:
    """Compteurs du tableau de bord + chiffre d'affaires (somme exacte des prix, sans arrondi)."""
    prices = payments_repository.list_payment_prices(db)
    return {
        "users": admin_repository.count_table_rows(db, "users"),
        "products": admin_repository.count_table_rows(db, "menu"),
        "orders": admin_repository.count_table_rows(db, "payments"),
        "revenue": math.fsum(float(p or 0) for p in prices),
    }

def order_stats(db: Client) -> List[Dict[str, Any]]:
    """
    Ventilation des ventes par catégorie.
    - Jointure paiements.menu_item_ids -> menu.id (un id répété dans un même paiement ne compte qu'une fois,
      un id absent du menu est ignoré)
    - Groupement par catégorie: count = nombre d'articles, total = somme des prix arrondie à 2 décimales
    """
    refs_per_payment = payments_repository.list_payment_menu_refs(db)
    all_ids = {str(i) for refs in refs_per_payment for i in refs}
    menu_by_id = {str(m.get("id")): m for m in menu_repository.fetch_menu_by_ids(db, all_ids)}

    counts: Dict[str, int] = defaultdict(int)
    totals: Dict[str, List[float]] = defaultdict(list)
    for refs in refs_per_payment:
        for menu_id in dict.fromkeys(str(i) for i in refs):
            item = menu_by_id.get(menu_id)
            if not item:
                continue
            category = item.get("category")
            counts[category] += 1
            totals[category].append(float(item.get("price") or 0))

    return [
        {"category": category, "count": counts[category], "total": round(math.fsum(totals[category]), 2)}
        for category in sorted(counts, key=lambda c: (c is None, str(c)))
    ]
