import json
import pytest

from fastapi import status

from app.models.category_vehicle_brand import CategoryVehicleBrand
from app.models.vehicle_brand import VehicleBrand

BRANDS_URL = "/api/admin/vehicle-brands"


def _payload(**overrides) -> dict:
    body = {
        "name":        "MAN",
        "slug":        "man",
        "fullName":    "MAN Truck & Bus",
        "type":        "truck",
        "models":      [{"name": "TGM", "years": "2007-2024"}],
        "gallery":     ["/uploads/man_1.jpg"],
        "sortOrder":   1,
        "published":   True,
        "categoryIds": [],
    }
    body.update(overrides)
    return body


def _link_count(db, brand_id: str) -> int:
    return db.query(CategoryVehicleBrand).filter(CategoryVehicleBrand.vehicleBrandId == brand_id).count()


# ─── Create ───────────────────────────────────────────────────────────────────
def test_create_brand_with_category_links(client, auth_headers, make_category):
    a = make_category("wozy-strazackie")
    b = make_category("polki-do-kabin")

    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id, b.id]))

    assert res.status_code == status.HTTP_201_CREATED
    data = res.json()["data"]
    assert data["slug"] == "man"
    assert data["models"] == [{"name": "TGM", "years": "2007-2024"}]
    assert data["gallery"] == ["/uploads/man_1.jpg"]
    assert {c["slug"] for c in data["categories"]} == {"wozy-strazackie", "polki-do-kabin"}


def test_create_brand_applies_defaults(client, auth_headers):
    res = client.post(BRANDS_URL, headers=auth_headers, json={"name": "Iveco", "slug": "iveco"})

    assert res.status_code == status.HTTP_201_CREATED
    data = res.json()["data"]
    assert data["type"] == "truck"
    assert data["models"] == []
    assert data["gallery"] == []
    assert data["sortOrder"] == 0
    assert data["published"] is True
    assert data["categories"] == []


def test_create_brand_accepts_json_encoded_lists(client, auth_headers):
    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(
        models=json.dumps([{"name": "TGX", "years": "2007-2024"}]),
        gallery=json.dumps(["/uploads/a.jpg", "/uploads/b.jpg"]),
    ))

    assert res.status_code == status.HTTP_201_CREATED
    data = res.json()["data"]
    assert data["models"] == [{"name": "TGX", "years": "2007-2024"}]
    assert data["gallery"] == ["/uploads/a.jpg", "/uploads/b.jpg"]


def test_create_brand_with_duplicate_slug_conflicts(client, auth_headers, db, make_brand):
    make_brand("man", name="MAN")

    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(name="Other MAN"))

    assert res.status_code == status.HTTP_409_CONFLICT
    assert res.json()["error"]["code"] == "DUPLICATE_ENTRY"
    assert res.json()["error"]["field"] == "slug"
    assert db.query(VehicleBrand).count() == 1


def test_create_brand_with_unknown_category_writes_nothing(client, auth_headers, db, make_category):
    a = make_category("wozy-strazackie")

    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id, "missing"]))

    assert res.status_code == status.HTTP_404_NOT_FOUND
    assert db.query(VehicleBrand).count() == 0
    assert db.query(CategoryVehicleBrand).count() == 0


def test_create_brand_rejects_blank_name(client, auth_headers):
    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(name="   "))

    assert res.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_brand_rejects_unknown_type(client, auth_headers):
    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(type="tractor"))
    assert res.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.parametrize("category_ids", [
    "6c5e13b2a9d4f8c7e1a0b3d5f7c9e2a4",
    {"6c5e13b2a9d4f8c7e1a0b3d5f7c9e2a4": True},
    [{"id": "6c5e13b2a9d4f8c7e1a0b3d5f7c9e2a4"}],
])
def test_create_brand_rejects_category_ids_that_are_not_a_list_of_strings(client, auth_headers, db, category_ids):
    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=category_ids))

    assert res.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert db.query(VehicleBrand).count() == 0


def test_create_brand_name_longer_than_column_is_rejected(client, auth_headers, db):
    ok = client.post(BRANDS_URL, headers=auth_headers, json=_payload(name="M" * 150))
    too_long = client.post(BRANDS_URL, headers=auth_headers, json=_payload(name="M" * 151, slug="man-2"))

    assert ok.status_code == status.HTTP_201_CREATED
    assert too_long.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert too_long.json()["error"]["field"] == "name"
    assert db.query(VehicleBrand).count() == 1


def test_duplicate_category_ids_create_one_link(client, auth_headers, db, make_category):
    a = make_category("wozy-strazackie")

    res = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id, a.id, a.id]))

    assert res.status_code == status.HTTP_201_CREATED
    assert _link_count(db, res.json()["data"]["id"]) == 1


# ─── Update ───────────────────────────────────────────────────────────────────
def test_update_replaces_fields_and_links(client, auth_headers, make_category):
    a = make_category("wozy-strazackie")
    b = make_category("polki-do-kabin")
    c = make_category("oswietlenie-led")
    created = client.post(BRANDS_URL, headers=auth_headers,
                          json=_payload(categoryIds=[a.id, b.id], description="Old text")).json()["data"]

    res = client.put(f"{BRANDS_URL}/{created['id']}", headers=auth_headers,
                     json={"name": "MAN Trucks", "slug": "man", "categoryIds": [c.id]})

    assert res.status_code == status.HTTP_200_OK
    data = res.json()["data"]
    assert data["name"] == "MAN Trucks"
    # omitted fields fall back to their defaults
    assert data["description"] is None
    assert data["models"] == []
    assert data["gallery"] == []
    assert data["sortOrder"] == 0
    assert [cat["slug"] for cat in data["categories"]] == ["oswietlenie-led"]


def test_update_with_empty_links_clears_them(client, auth_headers, db, make_category):
    a = make_category("wozy-strazackie")
    created = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id])).json()["data"]

    res = client.put(f"{BRANDS_URL}/{created['id']}", headers=auth_headers, json=_payload(categoryIds=[]))

    assert res.status_code == status.HTTP_200_OK
    assert res.json()["data"]["categories"] == []
    assert _link_count(db, created["id"]) == 0


def test_update_keeping_own_slug_is_allowed(client, auth_headers):
    created = client.post(BRANDS_URL, headers=auth_headers, json=_payload()).json()["data"]

    res = client.put(f"{BRANDS_URL}/{created['id']}", headers=auth_headers, json=_payload(name="MAN 2"))

    assert res.status_code == status.HTTP_200_OK
    assert res.json()["data"]["slug"] == "man"


def test_update_to_taken_slug_conflicts_without_writes(client, auth_headers, make_brand):
    make_brand("scania", name="Scania")
    created = client.post(BRANDS_URL, headers=auth_headers, json=_payload()).json()["data"]

    res = client.put(f"{BRANDS_URL}/{created['id']}", headers=auth_headers,
                     json=_payload(name="Renamed", slug="scania"))

    assert res.status_code == status.HTTP_409_CONFLICT
    current = client.get(f"{BRANDS_URL}/{created['id']}", headers=auth_headers).json()["data"]
    assert current["name"] == "MAN"
    assert current["slug"] == "man"


def test_update_with_unknown_category_keeps_old_state(client, auth_headers, make_category):
    a = make_category("wozy-strazackie")
    created = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id])).json()["data"]

    res = client.put(f"{BRANDS_URL}/{created['id']}", headers=auth_headers,
                     json=_payload(name="Renamed", categoryIds=["missing"]))

    assert res.status_code == status.HTTP_404_NOT_FOUND
    current = client.get(f"{BRANDS_URL}/{created['id']}", headers=auth_headers).json()["data"]
    assert current["name"] == "MAN"
    assert [c["slug"] for c in current["categories"]] == ["wozy-strazackie"]


def test_update_unknown_brand_is_not_found(client, auth_headers):
    res = client.put(f"{BRANDS_URL}/missing", headers=auth_headers, json=_payload())
    assert res.status_code == status.HTTP_404_NOT_FOUND


# ─── Read / Delete ────────────────────────────────────────────────────────────
def test_list_brands_is_sorted_and_includes_unpublished(client, auth_headers, make_brand):
    make_brand("volvo", name="Volvo", sortOrder=3)
    make_brand("man", name="MAN", sortOrder=1, published=False)
    make_brand("scania", name="Scania", sortOrder=2)

    res = client.get(BRANDS_URL, headers=auth_headers)

    assert res.status_code == status.HTTP_200_OK
    assert [b["slug"] for b in res.json()["data"]] == ["man", "scania", "volvo"]


def test_delete_brand_removes_its_links_only(client, auth_headers, db, make_category):
    a = make_category("wozy-strazackie")
    created = client.post(BRANDS_URL, headers=auth_headers, json=_payload(categoryIds=[a.id])).json()["data"]

    res = client.delete(f"{BRANDS_URL}/{created['id']}", headers=auth_headers)

    assert res.status_code == status.HTTP_200_OK
    assert db.query(VehicleBrand).filter(VehicleBrand.id == created["id"]).first() is None
    assert db.query(CategoryVehicleBrand).count() == 0
    assert client.get("/api/categories/wozy-strazackie").status_code == status.HTTP_200_OK


def test_delete_unknown_brand_is_not_found(client, auth_headers):
    res = client.delete(f"{BRANDS_URL}/missing", headers=auth_headers)
    assert res.status_code == status.HTTP_404_NOT_FOUND
    assert res.json()["error"]["code"] == "NOT_FOUND"
