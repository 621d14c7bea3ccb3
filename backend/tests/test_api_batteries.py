from datetime import datetime
from decimal import Decimal

from conftest import battery_payload


def test_create_and_retrieve(client, register):
    owner = register("acme")
    res = client.post("/api/batteries", json=battery_payload(owner["id"]))
    assert res.status_code == 201
    created = res.json()
    assert isinstance(created["id"], int)
    assert created["createdAt"]
    assert created["userId"] == owner["id"]
    assert created["manufacturer"] == "LG"
    assert Decimal(created["price"]) == Decimal("5000")
    assert Decimal(created["capacity"]) == Decimal("10")
    assert created["certifications"] == ["CE", "UL9540"]
    assert created["additionalSpecs"] == {"ipRating": "IP55"}
    assert created["availability"] is True

    fetched = client.get(f"/api/batteries/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_requires_existing_owner(client):
    res = client.post("/api/batteries", json=battery_payload(4242))
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}


def test_create_reports_field_errors(client, register):
    owner = register("acme")
    payload = battery_payload(owner["id"], listingType="swap", healthPercentage=120)
    del payload["title"]
    res = client.post("/api/batteries", json=payload)
    assert res.status_code == 400
    fields = {err["field"] for err in res.json()["errors"]}
    assert fields == {"title", "listingType", "healthPercentage"}


def test_get_unknown_or_non_numeric_id(client):
    assert client.get("/api/batteries/999").status_code == 404
    res = client.get("/api/batteries/legacy-abc")
    assert res.status_code == 404
    assert res.json() == {"message": "Battery not found"}
    # unicode digits are not ascii ids
    assert client.get("/api/batteries/%C2%B2").status_code == 404
    assert client.get("/api/batteries/%E2%91%A0").status_code == 404


def test_update_with_unicode_digit_id_is_not_found(client, register):
    owner = register("acme")
    res = client.put("/api/batteries/%C2%B2", json={"price": "1"}, headers=owner["headers"])
    assert res.status_code == 404
    res = client.delete("/api/batteries/%E2%91%A0", headers=owner["headers"])
    assert res.status_code == 404


def test_list_is_paginated_newest_first(client, register, create_battery):
    owner = register("acme")
    created = [create_battery(owner["id"], title=f"Unit {i}") for i in range(25)]

    default_page = client.get("/api/batteries").json()
    assert len(default_page) == 20
    assert default_page[0]["id"] == created[-1]["id"]

    page = client.get("/api/batteries", params={"limit": 5, "offset": 20}).json()
    assert [b["title"] for b in page] == ["Unit 4", "Unit 3", "Unit 2", "Unit 1", "Unit 0"]


def test_list_rejects_non_numeric_paging(client):
    assert client.get("/api/batteries?limit=ten").status_code == 400
    assert client.get("/api/batteries?offset=x").status_code == 400
    assert client.get("/api/batteries?limit=-1").status_code == 400


def test_owner_partial_update(client, register, create_battery):
    owner = register("acme")
    battery = create_battery(owner["id"])
    res = client.put(
        f"/api/batteries/{battery['id']}",
        json={"price": "4500.50", "availability": False},
        headers=owner["headers"],
    )
    assert res.status_code == 200
    updated = res.json()
    assert Decimal(updated["price"]) == Decimal("4500.50")
    assert updated["availability"] is False
    assert updated["title"] == battery["title"]
    assert updated["createdAt"] == battery["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(battery["updatedAt"])


def test_update_refreshes_timestamp_even_without_changes(client, register, create_battery):
    owner = register("acme")
    battery = create_battery(owner["id"])
    first = client.put(f"/api/batteries/{battery['id']}", json={}, headers=owner["headers"]).json()
    second = client.put(f"/api/batteries/{battery['id']}", json={}, headers=owner["headers"]).json()
    assert datetime.fromisoformat(second["updatedAt"]) > datetime.fromisoformat(first["updatedAt"])


def test_update_cannot_reassign_owner(client, register, create_battery):
    owner = register("acme")
    other = register("rival")
    battery = create_battery(owner["id"])
    res = client.put(f"/api/batteries/{battery['id']}", json={"userId": other["id"], "id": 99}, headers=owner["headers"])
    assert res.status_code == 200
    assert res.json()["userId"] == owner["id"]
    assert res.json()["id"] == battery["id"]


def test_update_validation_errors(client, register, create_battery):
    owner = register("acme")
    battery = create_battery(owner["id"])
    url = f"/api/batteries/{battery['id']}"
    res = client.put(url, json={"title": None, "category": "toys"}, headers=owner["headers"])
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid battery data"
    bad_json = client.put(url, content=b"{not json", headers={**owner["headers"], "Content-Type": "application/json"})
    assert bad_json.status_code == 400


def test_update_by_other_user_is_forbidden(client, register, create_battery):
    owner = register("acme")
    intruder = register("intruder")
    battery = create_battery(owner["id"])
    url = f"/api/batteries/{battery['id']}"

    res = client.put(url, json={"price": "1"}, headers=intruder["headers"])
    assert res.status_code == 403
    # payload validity does not matter
    assert client.put(url, json={"price": "free"}, headers=intruder["headers"]).status_code == 403
    assert client.get(url).json() == battery


def test_update_requires_authentication(client, register, create_battery):
    owner = register("acme")
    battery = create_battery(owner["id"])
    assert client.put(f"/api/batteries/{battery['id']}", json={"price": "1"}).status_code == 401
    assert client.put("/api/batteries/999", json={}, headers=owner["headers"]).status_code == 404


def test_owner_delete(client, register, create_battery):
    owner = register("acme")
    battery = create_battery(owner["id"])
    res = client.delete(f"/api/batteries/{battery['id']}", headers=owner["headers"])
    assert res.status_code == 204
    assert res.content == b""
    assert client.get(f"/api/batteries/{battery['id']}").status_code == 404
    assert client.delete(f"/api/batteries/{battery['id']}", headers=owner["headers"]).status_code == 404


def test_delete_requires_auth_and_ownership(client, register, create_battery):
    owner = register("acme")
    intruder = register("intruder")
    battery = create_battery(owner["id"])
    url = f"/api/batteries/{battery['id']}"
    assert client.delete(url).status_code == 401
    assert client.delete(url, headers=intruder["headers"]).status_code == 403
    assert client.get(url).status_code == 200


def test_delete_removes_inquiries_on_listing(client, register, create_battery):
    owner = register("acme")
    buyer = register("buyer")
    battery = create_battery(owner["id"])
    client.post("/api/inquiries", json={"batteryId": battery["id"], "message": "Still available?"}, headers=buyer["headers"])
    assert client.delete(f"/api/batteries/{battery['id']}", headers=owner["headers"]).status_code == 204
    assert client.get("/api/admin/inquiries", headers=owner["headers"]).json() == []


def test_category_listing(client, register, create_battery):
    owner = register("acme")
    create_battery(owner["id"], category="ev", title="EV pack")
    create_battery(owner["id"], category="residential")
    res = client.get("/api/categories/ev")
    assert res.status_code == 200
    assert [b["title"] for b in res.json()] == ["EV pack"]
    assert client.get("/api/categories/unknown").json() == []


def test_featured_defaults_to_four_most_recent(client, register, create_battery):
    owner = register("acme")
    created = [create_battery(owner["id"], title=f"Unit {i}") for i in range(6)]
    featured = client.get("/api/featured").json()
    assert [b["id"] for b in featured] == [b["id"] for b in reversed(created[2:])]
    assert len(client.get("/api/featured?limit=2").json()) == 2
    assert client.get("/api/featured?limit=abc").status_code == 400


def test_user_batteries(client, register, create_battery):
    owner = register("acme")
    other = register("other")
    mine = create_battery(owner["id"])
    create_battery(other["id"])
    res = client.get(f"/api/users/{owner['id']}/batteries")
    assert res.status_code == 200
    assert [b["id"] for b in res.json()] == [mine["id"]]
    assert client.get("/api/users/999/batteries").status_code == 404
    assert client.get("/api/users/abc/batteries").status_code == 400


def test_store_failure_is_generic_500(client, app, monkeypatch):
    from sqlalchemy.exc import OperationalError

    def broken(*args, **kwargs):
        raise OperationalError("SELECT ...", {}, Exception("connection reset"))

    monkeypatch.setattr(app.state.battery_service.repo, "list_recent", broken)
    res = client.get("/api/batteries")
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
