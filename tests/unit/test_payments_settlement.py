import pytest

from shop_backend.errors import SettlementFailed
from shop_backend.payments import service
from tests.fakes import FakeSupabase

PAYER = "a@b.com"

def _payment(cart_items, price=25.5, **extra):
    data = {
        "price": price,
        "cart_items": cart_items,
        "menu_items": ["m1", "m2"],
        "transaction_id": "pi_123",
        "quantity": len(cart_items),
        "status": "service pending",
        "item_names": None,
    }
    data.update(extra)
    return data

@pytest.fixture()
def db():
    return FakeSupabase({"carts": [
        {"id": "c1", "email": PAYER, "menu_item_id": "m1", "price": 10.0},
        {"id": "c2", "email": PAYER, "menu_item_id": "m2", "price": 15.5},
        {"id": "c3", "email": "other@b.com", "menu_item_id": "m1", "price": 10.0},
    ]})

def test_settle_inserts_payment_then_removes_cart_items(db):
    res = service.settle_payment(db, PAYER, _payment(["c1", "c2"]))

    assert db.calls.index(("payments", "insert")) < db.calls.index(("carts", "delete"))
    assert res["paymentRecordId"] == res["insertedId"]
    assert sorted(res["removedCartItemIds"]) == ["c1", "c2"]
    assert res["deletedCount"] == 2
    assert res["cleanupPending"] is False

    record = db.rows("payments")[0]
    assert record["email"] == PAYER
    assert record["cart_item_ids"] == ["c1", "c2"]
    assert record["menu_item_ids"] == ["m1", "m2"]
    assert record["transaction_id"] == "pi_123"
    assert "item_names" not in record
    assert [c["id"] for c in db.rows("carts")] == ["c3"]

def test_settle_never_removes_another_users_items(db):
    res = service.settle_payment(db, PAYER, _payment(["c1", "c3"]))
    assert res["removedCartItemIds"] == ["c1"]
    # Seuls les articles du payeur figurent dans le paiement enregistré
    assert db.rows("payments")[0]["cart_item_ids"] == ["c1"]
    assert {c["id"] for c in db.rows("carts")} == {"c2", "c3"}

def test_settle_twice_with_overlap_removes_fewer_items(db):
    first = service.settle_payment(db, PAYER, _payment(["c1"]))
    second = service.settle_payment(db, PAYER, _payment(["c1", "c2"]))

    assert first["removedCartItemIds"] == ["c1"]
    assert second["removedCartItemIds"] == ["c2"]
    assert len(db.rows("payments")) == 2

    third = service.settle_payment(db, PAYER, _payment(["c1", "c2"]))
    assert third["removedCartItemIds"] == []
    assert third["deletedCount"] == 0
    # Les paiements précédents ne sont jamais supprimés
    assert len(db.rows("payments")) == 3

def test_settle_insert_failure_leaves_cart_untouched(db):
    db.fail_on.add(("payments", "insert"))
    with pytest.raises(SettlementFailed) as exc:
        service.settle_payment(db, PAYER, _payment(["c1", "c2"]))
    assert exc.value.status_code == 500
    assert ("carts", "delete") not in db.calls
    assert len(db.rows("carts")) == 3

def test_settle_cleanup_failure_keeps_payment_and_logs_cleanup(db):
    db.fail_on.add(("carts", "delete"))
    res = service.settle_payment(db, PAYER, _payment(["c1", "c2"]))

    assert res["cleanupPending"] is True
    assert res["removedCartItemIds"] == []
    assert len(db.rows("payments")) == 1
    cleanup = db.rows("settlement_cleanups")[0]
    assert cleanup["payment_id"] == res["paymentRecordId"]
    assert cleanup["cart_item_ids"] == ["c1", "c2"]
    assert cleanup["status"] == "pending"
    assert "carts.delete failed" in cleanup["last_error"]

def test_retry_pending_cleanups_completes_without_reinserting_payment(db):
    db.fail_on.add(("carts", "delete"))
    service.settle_payment(db, PAYER, _payment(["c1", "c2"]))

    # Toujours en échec: l'entrée reste pending
    res = service.retry_pending_cleanups(db)
    assert res == {"retried": 1, "completed": 0}
    assert db.rows("settlement_cleanups")[0]["status"] == "pending"

    db.fail_on.clear()
    res = service.retry_pending_cleanups(db)
    assert res == {"retried": 1, "completed": 1}
    assert db.rows("settlement_cleanups")[0]["status"] == "done"
    assert [c["id"] for c in db.rows("carts")] == ["c3"]
    assert len(db.rows("payments")) == 1

    assert service.retry_pending_cleanups(db) == {"retried": 0, "completed": 0}

def test_settle_records_only_existing_items_of_the_payer(db):
    res = service.settle_payment(db, PAYER, _payment(["c2", "gone", "c3", "c1"]))
    assert db.rows("payments")[0]["cart_item_ids"] == ["c2", "c1"]
    assert sorted(res["removedCartItemIds"]) == ["c1", "c2"]

def test_settle_owner_lookup_failure_records_nothing(db):
    db.fail_on.add(("carts", "select"))
    with pytest.raises(SettlementFailed):
        service.settle_payment(db, PAYER, _payment(["c1"]))
    assert ("payments", "insert") not in db.calls
    assert db.rows("payments") == []
    assert len(db.rows("carts")) == 3
