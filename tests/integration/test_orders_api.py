from decimal import Decimal

from tests.conftest import ADMIN_HEADERS

TOKEN = "browser-token-orders"

DELIVERY = {"name": "Amira Ben Salah", "phone": "22123456", "address": "12 rue de Marseille, Tunis"}


def _fill_cart(client, make_product):
    a = make_product(title="Theiere", price=Decimal("10"), colors=["Cuivre"])
    b = make_product(title="Plateau", price=Decimal("5"))
    client.post(f"/carts/browser/{TOKEN}/items", json={"product_id": a.id, "selected_color": "Cuivre"})
    client.post(f"/carts/browser/{TOKEN}/items", json={"product_id": b.id})
    client.patch(f"/carts/browser/{TOKEN}/items/{a.id}", json={"quantity": 2})
    return a, b


def test_checkout_requires_every_delivery_field(client, make_product):
    _fill_cart(client, make_product)

    r = client.post("/orders", json={"scope": "browser", "owner": TOKEN, **DELIVERY, "phone": "  "})
    assert r.status_code == 400
    assert r.json()["detail"] == "Tous les champs sont obligatoires."
    assert client.get(f"/carts/browser/{TOKEN}/count").json() == {"count": 2}


def test_checkout_rejects_empty_cart(client):
    r = client.post("/orders", json={"scope": "browser", "owner": TOKEN, **DELIVERY})
    assert r.status_code == 400


def test_checkout_creates_order_and_clears_cart(client, make_product, events, db):
    a, b = _fill_cart(client, make_product)

    r = client.post("/orders", json={"scope": "browser", "owner": TOKEN, **DELIVERY})
    assert r.status_code == 201
    order = r.json()
    assert Decimal(order["total_price"]) == Decimal("33")
    assert order["name"] == DELIVERY["name"]
    assert [(i["title"], i["quantity"], i["selected_color"]) for i in order["items"]] == [
        ("Theiere", 2, "Cuivre"),
        ("Plateau", 1, None),
    ]

    assert client.get(f"/carts/browser/{TOKEN}/count").json() == {"count": 0}
    assert events.published[-1] == ("browser", TOKEN, 0)

    db.expire_all()
    db.refresh(a)
    db.refresh(b)
    assert (a.sales, b.sales) == (2, 1)


def test_account_checkout(client, make_product, make_user):
    make_user(email="client@example.com")
    p = make_product(price=Decimal("40"))
    client.post("/carts/account/client@example.com/items", json={"product_id": p.id})

    r = client.post("/orders", json={"scope": "account", "owner": "client@example.com", **DELIVERY})
    assert r.status_code == 201
    assert Decimal(r.json()["total_price"]) == Decimal("48")
    assert client.get("/carts/account/client@example.com").json()["items"] == []


def test_admin_lists_and_deletes_orders(client, make_product):
    _fill_cart(client, make_product)
    created = client.post("/orders", json={"scope": "browser", "owner": TOKEN, **DELIVERY}).json()

    assert client.get("/orders").status_code == 401

    orders = client.get("/orders", headers=ADMIN_HEADERS).json()
    assert [o["id"] for o in orders] == [created["id"]]

    r = client.get(f"/orders/{created['id']}", headers=ADMIN_HEADERS)
    assert r.json()["items"] == created["items"]

    assert client.delete(f"/orders/{created['id']}", headers=ADMIN_HEADERS).status_code == 204
    assert client.get(f"/orders/{created['id']}", headers=ADMIN_HEADERS).status_code == 404
