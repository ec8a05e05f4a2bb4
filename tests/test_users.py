"""User administration and self-or-admin access."""

from __future__ import annotations

from decimal import Decimal

from app.domain.models.product import Product
from tests.support import auth_header


def test_list_users_admin_only(client, admin, alice, bob):
    assert client.get("/api/users", headers=auth_header(alice)).status_code == 403

    response = client.get("/api/users", headers=auth_header(admin))
    assert response.status_code == 200
    assert response.json()["pagination"]["totalItems"] == 3


def test_list_users_filters(client, db_session, admin, alice, bob):
    bob.is_artisan = True
    db_session.commit()

    artisans = client.get("/api/users?isArtisan=true", headers=auth_header(admin)).json()["data"]
    assert [u["username"] for u in artisans] == ["bob"]

    admins = client.get("/api/users?role=ADMIN", headers=auth_header(admin)).json()["data"]
    assert [u["username"] for u in admins] == ["admin"]

    found = client.get("/api/users?search=martin", headers=auth_header(admin)).json()["data"]
    assert [u["username"] for u in found] == ["alice"]


def test_user_reads_self_but_not_others(client, alice, bob):
    own = client.get(f"/api/users/{alice.id}", headers=auth_header(alice))
    other = client.get(f"/api/users/{bob.id}", headers=auth_header(alice))

    assert own.status_code == 200
    assert own.json()["data"]["username"] == "alice"
    assert other.status_code == 403


def test_admin_reads_any_user(client, admin, bob):
    response = client.get(f"/api/users/{bob.id}", headers=auth_header(admin))

    assert response.status_code == 200
    assert response.json()["data"]["email"] == bob.email


def test_non_admin_cannot_escalate_role(client, alice):
    response = client.put(
        f"/api/users/{alice.id}",
        json={"firstName": "Ally", "role": "ADMIN", "isArtisan": True},
        headers=auth_header(alice),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["firstName"] == "Ally"
    assert data["role"] == "USER"
    assert data["isArtisan"] is False


def test_admin_sets_admin_only_fields(client, admin, alice):
    response = client.put(
        f"/api/users/{alice.id}",
        json={"isArtisan": True, "specialCode": "ART-7"},
        headers=auth_header(admin),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["isArtisan"] is True
    assert data["specialCode"] == "ART-7"


def test_delete_user_admin_only(client, admin, alice, bob):
    assert client.delete(f"/api/users/{bob.id}", headers=auth_header(alice)).status_code == 403
    assert client.delete(f"/api/users/{bob.id}", headers=auth_header(admin)).status_code == 200
    assert client.get(f"/api/users/{bob.id}", headers=auth_header(admin)).status_code == 404


def test_delete_user_blocked_by_products(client, db_session, admin, alice, category):
    db_session.add(Product(name="Lamp", price=Decimal("10"), category_id=category.id, owner_id=alice.id))
    db_session.commit()

    response = client.delete(f"/api/users/{alice.id}", headers=auth_header(admin))

    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete user with existing products"


def test_user_products(client, db_session, alice, bob, category):
    db_session.add(Product(name="Lamp", price=Decimal("10"), category_id=category.id, owner_id=alice.id))
    db_session.commit()

    response = client.get(f"/api/users/{alice.id}/products", headers=auth_header(bob))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["username"] == "alice"
    assert [p["name"] for p in data["products"]] == ["Lamp"]
    assert data["pagination"]["totalItems"] == 1


def test_user_products_requires_auth(client, alice):
    assert client.get(f"/api/users/{alice.id}/products").status_code == 401


def test_admin_update_rejects_null_role(client, admin, alice):
    response = client.put(f"/api/users/{alice.id}", json={"role": None}, headers=auth_header(admin))

    assert response.status_code == 400


def test_delete_user_blocked_by_companies(client, admin, alice, alice_company):
    response = client.delete(f"/api/users/{alice.id}", headers=auth_header(admin))

    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete user with existing companies"
