import pytest

import shop_backend.admin.service as svc
from tests.fakes import FakeSupabase

@pytest.fixture()
def db():
    return FakeSupabase({
        "users": [{"id": "u1", "email": "a@b.com"}, {"id": "u2", "email": "c@d.com"}],
        "menu": [
            {"id": "m1", "category": "salad", "price": 10.333},
            {"id": "m2", "category": "salad", "price": 4.5},
            {"id": "m3", "category": "pizza", "price": 14.999},
        ],
        "payments": [
            {"id": "p1", "price": 25.5, "menu_item_ids": ["m1", "m3"]},
            {"id": "p2", "price": 10.25, "menu_item_ids": ["m1", "m2", "m1", "gone"]},
            {"id": "p3", "price": 0.125, "menu_item_ids": []},
        ],
    })

def test_admin_stats_counts_and_exact_revenue(db):
    res = svc.admin_stats(db)
    assert res["users"] == 2
    assert res["products"] == 3
    assert res["orders"] == 3
    # 25.5 + 10.25 + 0.125 sans arrondi
    assert res["revenue"] == 35.875

def test_admin_stats_empty_store():
    res = svc.admin_stats(FakeSupabase())
    assert res == {"users": 0, "products": 0, "orders": 0, "revenue": 0.0}

def test_order_stats_groups_by_category(db):
    res = svc.order_stats(db)
    # m1 répété dans p2 ne compte qu'une fois; "gone" est ignoré
    assert res == [
        {"category": "pizza", "count": 1, "total": 15.0},
        {"category": "salad", "count": 3, "total": 25.17},
    ]

def test_order_stats_without_payments():
    assert svc.order_stats(FakeSupabase({"menu": [{"id": "m1", "category": "x", "price": 1}]})) == []
