import pytest
import stripe
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

# Les fixtures `client` et `fake_db` sont fournies par `conftest.py`

@pytest.mark.functional
class TestCheckoutFlow:
    """
    Tests fonctionnels pour le parcours d'achat complet (API JSON).
    """

    def test_full_checkout_flow(self, client: TestClient, fake_db, monkeypatch):
        """
        Scénario complet :
        1. Inscription de a@b.com puis obtention d'un jeton.
        2. Ajout de deux articles au panier.
        3. Création d'un PaymentIntent pour 25.50 (2550 centimes).
        4. Enregistrement du paiement: les deux articles quittent le panier.
        5. Le panier est vide, le chiffre d'affaires admin reflète le paiement.
        """
        email = "a@b.com"
        fake_db.tables["menu"] = [
            {"id": "m1", "name": "Soup", "category": "soup", "price": 10.0},
            {"id": "m2", "name": "Salad", "category": "salad", "price": 15.5},
        ]
        create = MagicMock(return_value={"client_secret": "pi_1_secret_2"})
        monkeypatch.setattr(stripe.PaymentIntent, "create", create)

        # 1. Inscription + jeton
        r = client.post("/users", json={"email": email, "name": "Alice"})
        assert r.status_code == 200
        assert r.json()["insertedId"]
        token = client.post("/jwt", json={"email": email}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        # 2. Panier
        ids = []
        for menu_id, price in (("m1", 10.0), ("m2", 15.5)):
            r = client.post("/carts", json={"email": email, "menuItemId": menu_id, "price": price})
            ids.append(r.json()["insertedId"])
        cart = client.get("/carts", params={"email": email}, headers=headers).json()
        assert sorted(c["id"] for c in cart) == sorted(ids)

        # 3. PaymentIntent
        r = client.post("/create-payment-intent", json={"price": 25.50}, headers=headers)
        assert r.status_code == 200
        assert r.json()["clientSecret"] == "pi_1_secret_2"
        create.assert_called_once_with(amount=2550, currency="usd", payment_method_types=["card"])

        # 4. Paiement
        r = client.post("/payments", headers=headers, json={
            "price": 25.5,
            "cartItems": ids,
            "menuItems": ["m1", "m2"],
            "transactionId": "pi_1",
            "quantity": 2,
            "status": "service pending",
        })
        assert r.status_code == 200
        body = r.json()
        assert sorted(body["removedCartItemIds"]) == sorted(ids)
        assert body["deletedCount"] == 2
        assert body["cleanupPending"] is False

        # 5. Panier vide + statistiques admin
        assert client.get("/carts", params={"email": email}, headers=headers).json() == []
        fake_db.tables["users"].append({"id": "u-root", "email": "root@b.com", "role": "admin"})
        root = {"Authorization": f"Bearer {client.post('/jwt', json={'email': 'root@b.com'}).json()['token']}"}
        stats = client.get("/admin-stats", headers=root).json()
        assert stats["orders"] == 1
        assert stats["revenue"] == 25.5
        assert client.get("/order-stats", headers=root).json() == [
            {"category": "salad", "count": 1, "total": 15.5},
            {"category": "soup", "count": 1, "total": 10.0},
        ]

    def test_payment_with_foreign_token_cannot_empty_anothers_cart(self, client: TestClient, fake_db, member_headers):
        """Un paiement signé par un autre utilisateur ne retire jamais les articles de a@b.com."""
        client.post("/carts", json={"email": "a@b.com", "menuItemId": "m1", "price": 3})
        victim_id = fake_db.rows("carts")[0]["id"]

        r = client.post("/payments", headers=member_headers, json={
            "price": 3, "cartItems": [victim_id], "transactionId": "pi_x",
        })
        assert r.status_code == 200
        assert r.json()["removedCartItemIds"] == []
        assert [c["id"] for c in fake_db.rows("carts")] == [victim_id]
