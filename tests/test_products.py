"""Product catalog: filters, sorting, pagination and owner-scoped writes."""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.models.category import Category
from app.domain.models.product import Product
from tests.support import auth_header


def add_product(session, owner, category, name, price, **fields) -> Product:
    product = Product(name=name, price=Decimal(price), owner_id=owner.id, category_id=category.id, **fields)
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


@pytest.fixture
def catalog(db_session, alice, bob, category):
    furniture = Category(name="Furniture")
    db_session.add(furniture)
    db_session.commit()
    db_session.refresh(furniture)

    return {
        "lamp": add_product(db_session, alice, category, "Desk Lamp", "120.00", brand="Lumina", color="Black"),
        "bulb": add_product(db_session, alice, category, "LED Bulb", "15.50", brand="Lumina", color="White"),
        "chair": add_product(db_session, bob, furniture, "Oak Chair", "450.00", brand="Woodcraft", color="Brown"),
        "table": add_product(db_session, bob, furniture, "Oak Table", "900.00", brand="Woodcraft", color="Brown"),
        "sofa": add_product(db_session, bob, furniture, "Sofa 50% off", "300.00", brand="Comfy", color="Grey"),
        "furniture": furniture,
    }


def names(response) -> list[str]:
    return [item["name"] for item in response.json()["data"]]


def test_list_products_envelope(client, catalog):
    response = client.get("/api/products")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "timestamp" in body
    assert body["pagination"] == {
        "currentPage": 1,
        "totalPages": 1,
        "totalItems": 5,
        "itemsPerPage": 10,
        "hasNextPage": False,
        "hasPrevPage": False,
    }
    lamp = next(item for item in body["data"] if item["name"] == "Desk Lamp")
    assert Decimal(str(lamp["price"])) == Decimal("120.00")
    assert lamp["category"] == {"id": catalog["lamp"].category_id, "name": "Lighting"}
    assert lamp["owner"]["username"] == "alice"


def test_list_products_newest_first_by_default(client, catalog):
    response = client.get("/api/products")

    assert names(response) == ["Sofa 50% off", "Oak Table", "Oak Chair", "LED Bulb", "Desk Lamp"]


def test_price_range_sort_and_pages(client, catalog):
    first = client.get("/api/products?minPrice=100&maxPrice=500&sortBy=price&sortOrder=asc&limit=2")
    second = client.get("/api/products?minPrice=100&maxPrice=500&sortBy=price&sortOrder=asc&limit=2&page=2")

    assert names(first) == ["Desk Lamp", "Sofa 50% off"]
    assert names(second) == ["Oak Chair"]
    pagination = second.json()["pagination"]
    assert pagination["totalItems"] == 3
    assert pagination["totalPages"] == 2
    assert pagination["hasNextPage"] is False
    assert pagination["hasPrevPage"] is True


def test_sort_descending_unless_asc(client, catalog):
    response = client.get("/api/products?sortBy=price")

    assert names(response)[0] == "Oak Table"


def test_unknown_sort_field_falls_back_to_default(client, catalog):
    response = client.get("/api/products?sortBy=password")

    assert response.status_code == 200
    assert names(response)[0] == "Sofa 50% off"


def test_search_is_case_insensitive_across_fields(client, catalog):
    assert set(names(client.get("/api/products?search=oak"))) == {"Oak Chair", "Oak Table"}
    assert set(names(client.get("/api/products?search=LUMINA"))) == {"Desk Lamp", "LED Bulb"}


def test_search_treats_wildcards_literally(client, catalog):
    assert names(client.get("/api/products?search=50%25")) == ["Sofa 50% off"]
    assert names(client.get("/api/products?search=_")) == []


def test_filter_by_category_brand_and_color(client, catalog):
    furniture_id = catalog["furniture"].id

    assert len(names(client.get(f"/api/products?categoryId={furniture_id}"))) == 3
    assert set(names(client.get("/api/products?brand=wood"))) == {"Oak Chair", "Oak Table"}
    assert names(client.get("/api/products?color=white")) == ["LED Bulb"]


def test_page_beyond_range_is_empty(client, catalog):
    response = client.get("/api/products?page=9")

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"]["totalItems"] == 5


def test_limit_is_clamped(client, catalog):
    response = client.get("/api/products?limit=1000")

    assert response.json()["pagination"]["itemsPerPage"] == 100


def test_invalid_page_is_rejected(client):
    response = client.get("/api/products?page=0")

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_get_product_not_found(client):
    response = client.get("/api/products/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_create_product_requires_auth(client, category):
    response = client.post("/api/products", json={"name": "Lamp", "price": 10, "categoryId": category.id})

    assert response.status_code == 401


def test_create_product(client, alice, category):
    response = client.post(
        "/api/products",
        json={"name": "Floor Lamp", "price": "199.99", "categoryId": category.id, "brand": "Lumina"},
        headers=auth_header(alice),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["ownerId"] == alice.id
    assert Decimal(str(data["price"])) == Decimal("199.99")
    assert data["rating"] == 0
    assert data["reviewCount"] == 0


def test_create_product_unknown_category(client, alice):
    response = client.post(
        "/api/products",
        json={"name": "Floor Lamp", "price": 10, "categoryId": 999},
        headers=auth_header(alice),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Category not found"


def test_create_product_negative_price(client, alice, category):
    response = client.post(
        "/api/products",
        json={"name": "Floor Lamp", "price": -1, "categoryId": category.id},
        headers=auth_header(alice),
    )

    assert response.status_code == 400


def test_my_products(client, catalog, alice):
    response = client.get("/api/products/user/my-products", headers=auth_header(alice))

    assert response.status_code == 200
    assert set(names(response)) == {"Desk Lamp", "LED Bulb"}


def test_owner_updates_product(client, catalog, alice):
    lamp = catalog["lamp"]
    response = client.put(f"/api/products/{lamp.id}", json={"price": 99}, headers=auth_header(alice))

    assert response.status_code == 200
    data = response.json()["data"]
    assert Decimal(str(data["price"])) == Decimal("99")
    assert data["name"] == "Desk Lamp"


def test_non_owner_cannot_update_product(client, catalog, bob):
    lamp = catalog["lamp"]
    response = client.put(f"/api/products/{lamp.id}", json={"price": 1}, headers=auth_header(bob))

    assert response.status_code == 403
    assert response.json()["message"] == "Access denied: You can only access your own resources"


def test_admin_deletes_any_product(client, catalog, admin):
    lamp = catalog["lamp"]
    response = client.delete(f"/api/products/{lamp.id}", headers=auth_header(admin))

    assert response.status_code == 200
    assert client.get(f"/api/products/{lamp.id}").status_code == 404


def test_non_owner_cannot_delete_product(client, catalog, alice):
    chair = catalog["chair"]
    response = client.delete(f"/api/products/{chair.id}", headers=auth_header(alice))

    assert response.status_code == 403


def test_empty_update_changes_nothing(client, catalog, alice):
    lamp = catalog["lamp"]
    before = client.get(f"/api/products/{lamp.id}").json()["data"]

    response = client.put(f"/api/products/{lamp.id}", json={}, headers=auth_header(alice))

    assert response.status_code == 200
    assert response.json()["data"] == before


@pytest.mark.parametrize("field", ["name", "price", "categoryId"])
def test_null_required_field_is_rejected(client, catalog, alice, field):
    lamp = catalog["lamp"]
    response = client.put(f"/api/products/{lamp.id}", json={field: None}, headers=auth_header(alice))

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"
    assert response.json()["errors"][0]["field"] == field


def test_null_optional_field_clears_it(client, catalog, alice):
    lamp = catalog["lamp"]
    response = client.put(f"/api/products/{lamp.id}", json={"brand": None}, headers=auth_header(alice))

    assert response.status_code == 200
    assert response.json()["data"]["brand"] is None
