import pytest

from golden_store.models import models
from tests.conftest import PRODUCT


def _create(client, auth_headers, **overrides):
    r = client.post("/api/products", json={**PRODUCT, **overrides}, headers=auth_headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_product(client, auth_headers):
    p = _create(client, auth_headers)
    assert p["slug"] == "cincin-aurora"
    assert p["price"] == 1250000
    assert p["shopeeUrl"] == PRODUCT["shopeeUrl"]
    assert p["whatsappNumber"] == "6281234567890"
    assert p["tags"] == ["Ring", "Best Seller"]
    assert p["id"] and p["createdAt"]


def test_create_requires_auth(client, db):
    r = client.post("/api/products", json=PRODUCT)
    assert r.status_code == 401
    assert db.query(models.Product).count() == 0


def test_same_name_gets_suffixed_slug(client, auth_headers):
    assert _create(client, auth_headers)["slug"] == "cincin-aurora"
    assert _create(client, auth_headers)["slug"] == "cincin-aurora-1"
    assert _create(client, auth_headers)["slug"] == "cincin-aurora-2"


def test_explicit_slug_is_slugified(client, auth_headers):
    assert _create(client, auth_headers, slug="Ring Aurora 2")["slug"] == "ring-aurora-2"


def test_price_is_rounded_half_up(client, auth_headers):
    assert _create(client, auth_headers, price=10.5)["price"] == 11
    assert _create(client, auth_headers, price="99.4")["price"] == 99


def test_tags_and_optional_fields_are_cleaned(client, auth_headers):
    p = _create(client, auth_headers, tags=[" a ", "", 3], whatsappNumber="  ")
    assert p["tags"] == ["a", "3"]
    assert p["whatsappNumber"] is None
    p = _create(client, auth_headers, tags="not-a-list")
    assert p["tags"] == []


@pytest.mark.parametrize("overrides", [
    {"name": ""},
    {"name": "   "},
    {"description": ""},
    {"image": None},
    {"shopeeUrl": " "},
    {"price": -1},
    {"price": "abc"},
    {"price": "NaN"},
    {"price": None},
    {"price": 1e20},
    {"price": 2147483648},
])
def test_invalid_payload_is_rejected_before_write(client, auth_headers, db, overrides):
    r = client.post("/api/products", json={**PRODUCT, **overrides}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["message"]
    assert db.query(models.Product).count() == 0


def test_nan_literal_price_is_rejected(client, auth_headers, db):
    body = b'{"name": "X", "price": NaN, "image": "i", "description": "d", "shopeeUrl": "s"}'
    r = client.post("/api/products", content=body, headers={**auth_headers, "Content-Type": "application/json"})
    assert r.status_code == 400
    assert db.query(models.Product).count() == 0


def test_missing_price_is_rejected(client, auth_headers):
    body = {k: v for k, v in PRODUCT.items() if k != "price"}
    r = client.post("/api/products", json=body, headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"message": "Field price is required."}


def test_list_is_public_and_newest_first(client, auth_headers):
    _create(client, auth_headers, name="First")
    _create(client, auth_headers, name="Second")
    r = client.get("/api/products")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Second", "First"]


def test_lookup_by_id_or_slug(client, auth_headers):
    p = _create(client, auth_headers)
    assert client.get(f"/api/products/{p['id']}").json()["id"] == p["id"]
    assert client.get(f"/api/products/{p['slug']}").json()["id"] == p["id"]


def test_lookup_unknown_is_404(client):
    r = client.get("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found."}


def test_update_with_same_name_keeps_slug(client, auth_headers):
    _create(client, auth_headers, slug="custom-ring")
    p = client.get("/api/products/custom-ring").json()
    r = client.put(f"/api/products/{p['id']}", json={**PRODUCT, "price": 5}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["slug"] == "custom-ring"
    assert r.json()["price"] == 5


def test_update_with_new_name_regenerates_slug(client, auth_headers):
    p = _create(client, auth_headers)
    r = client.put(f"/api/products/{p['id']}", json={**PRODUCT, "name": "Kalung Luna"}, headers=auth_headers)
    assert r.json()["slug"] == "kalung-luna"
    assert client.get("/api/products/kalung-luna").json()["id"] == p["id"]
    assert client.get("/api/products/cincin-aurora").status_code == 404


def test_update_with_new_name_avoids_other_slugs(client, auth_headers):
    _create(client, auth_headers, name="Kalung Luna")
    p = _create(client, auth_headers)
    r = client.put(f"/api/products/{p['id']}", json={**PRODUCT, "name": "Kalung Luna"}, headers=auth_headers)
    assert r.json()["slug"] == "kalung-luna-1"


def test_update_with_explicit_slug(client, auth_headers):
    p = _create(client, auth_headers)
    r = client.put(f"/api/products/{p['id']}", json={**PRODUCT, "slug": "Aurora Ring"}, headers=auth_headers)
    assert r.json()["slug"] == "aurora-ring"


def test_update_unknown_is_404(client, auth_headers):
    r = client.put("/api/products/nope", json=PRODUCT, headers=auth_headers)
    assert r.status_code == 404


def test_update_validates_payload(client, auth_headers):
    p = _create(client, auth_headers)
    r = client.put(f"/api/products/{p['id']}", json={**PRODUCT, "price": -5}, headers=auth_headers)
    assert r.status_code == 400
    assert client.get(f"/api/products/{p['id']}").json()["price"] == PRODUCT["price"]


def test_delete_product(client, auth_headers):
    p = _create(client, auth_headers)
    assert client.delete(f"/api/products/{p['id']}").status_code == 401
    r = client.delete(f"/api/products/{p['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Product deleted."}
    assert client.get(f"/api/products/{p['id']}").status_code == 404
    assert client.delete(f"/api/products/{p['id']}", headers=auth_headers).status_code == 404


def test_price_at_column_limit_is_accepted(client, auth_headers):
    assert _create(client, auth_headers, price=2147483647)["price"] == 2147483647
