import logging
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from minimal_api.app.services import validation

from .conftest import bearer


def _create(client, headers, name="Civic", brand="Honda", year=2020):
    return client.post("/vehicles", json={"name": name, "brand": brand, "year": year}, headers=headers)


def test_create_and_get_vehicle(client, editor_headers):
    resp = _create(client, editor_headers)
    assert resp.status_code == 201
    vehicle = resp.json()
    assert vehicle["name"] == "Civic"
    assert resp.headers["location"] == f"/vehicle/{vehicle['id']}"

    resp = client.get(f"/vehicle/{vehicle['id']}", headers=editor_headers)
    assert resp.status_code == 200
    assert resp.json() == vehicle


def test_create_vehicle_validation(client, admin_headers):
    resp = _create(client, admin_headers, name="", brand="", year=1949)
    assert resp.status_code == 400
    assert resp.json() == {
        "messages": [validation.NAME_EMPTY, validation.BRAND_EMPTY, validation.YEAR_TOO_OLD]
    }
    assert _create(client, admin_headers, year=1950).status_code == 201


def test_unknown_vehicle_is_404(client, admin_headers):
    assert client.get("/vehicle/999", headers=admin_headers).status_code == 404
    assert client.delete("/vehicle/999", headers=admin_headers).status_code == 404


def test_update_unknown_vehicle_is_404_before_validation(client, admin_headers):
    resp = client.put("/vehicle/999", json={"name": "", "brand": "", "year": 1900}, headers=admin_headers)
    assert resp.status_code == 404


def test_update_vehicle(client, admin_headers):
    vehicle_id = _create(client, admin_headers).json()["id"]
    resp = client.put(
        f"/vehicle/{vehicle_id}",
        json={"name": "Accord", "brand": "Honda", "year": 2022},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {"id": vehicle_id, "name": "Accord", "brand": "Honda", "year": 2022}

    resp = client.put(f"/vehicle/{vehicle_id}", json={"name": "Accord", "brand": "Honda", "year": 1900}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"messages": [validation.YEAR_TOO_OLD]}
    assert client.get(f"/vehicle/{vehicle_id}", headers=admin_headers).json()["year"] == 2022


def test_editor_cannot_update_or_delete(client, editor_headers):
    vehicle_id = _create(client, editor_headers).json()["id"]
    payload = {"name": "Accord", "brand": "Honda", "year": 2022}
    assert client.put(f"/vehicle/{vehicle_id}", json=payload, headers=editor_headers).status_code == 403
    assert client.delete(f"/vehicle/{vehicle_id}", headers=editor_headers).status_code == 403


def test_delete_vehicle(client, admin_headers):
    vehicle_id = _create(client, admin_headers).json()["id"]
    assert client.delete(f"/vehicle/{vehicle_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/vehicle/{vehicle_id}", headers=admin_headers).status_code == 404


def test_list_and_filter_vehicles(client, admin_headers):
    _create(client, admin_headers, name="Civic", brand="Honda")
    _create(client, admin_headers, name="Corolla", brand="Toyota")
    _create(client, admin_headers, name="Civic Si", brand="Honda")

    assert len(client.get("/vehicles", headers=admin_headers).json()) == 3
    page2 = client.get("/vehicles", params={"page": 2}, headers=admin_headers).json()
    assert [v["name"] for v in page2] == ["Civic Si"]

    by_name = client.get("/vehiclesName/civic", headers=admin_headers).json()
    assert [v["name"] for v in by_name] == ["Civic", "Civic Si"]
    by_name_page2 = client.get("/vehiclesName/civic", params={"page": 2}, headers=admin_headers).json()
    assert by_name_page2 == []

    by_brand = client.get("/vehiclesBrand/TOYOTA", headers=admin_headers).json()
    assert [v["name"] for v in by_brand] == ["Corolla"]


def test_expired_token_is_rejected(client, app):
    administrator = SimpleNamespace(email="adm@example.com", profile="Admin")
    token = app.state.token_service.issue(administrator, now=datetime.now(timezone.utc) - timedelta(hours=25))
    resp = client.get("/vehicles", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "token_expired"


def test_null_fields_are_reported_as_messages(client, editor_headers):
    resp = client.post("/vehicles", json={"name": None, "brand": "Honda", "year": 2020}, headers=editor_headers)
    assert resp.status_code == 400
    assert resp.json() == {"messages": [validation.NAME_EMPTY]}

    resp = client.post("/vehicles", json={"name": None, "brand": None, "year": None}, headers=editor_headers)
    assert resp.status_code == 400
    assert resp.json() == {
        "messages": [validation.NAME_EMPTY, validation.BRAND_EMPTY, validation.YEAR_TOO_OLD]
    }


def test_update_unknown_vehicle_with_null_body_is_404(client, admin_headers):
    resp = client.put("/vehicle/999", json={"name": None, "brand": None, "year": None}, headers=admin_headers)
    assert resp.status_code == 404


def test_wrong_body_types_are_400(client, admin_headers):
    resp = client.post("/vehicles", json={"name": "Civic", "brand": "Honda", "year": "old"}, headers=admin_headers)
    assert resp.status_code == 400
    messages = resp.json()["messages"]
    assert len(messages) == 1
    assert messages[0].startswith("year: ")

    resp = client.post("/vehicles", json=["not", "an", "object"], headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["messages"]


def test_bad_body_still_requires_a_token(client):
    resp = client.post("/vehicles", json={"year": "old"})
    assert resp.status_code == 401


def test_creation_is_logged_with_caller(client, editor_headers, caplog):
    with caplog.at_level(logging.INFO, logger="minimal_api.app.api.v1.endpoints.vehicles"):
        vehicle_id = _create(client, editor_headers).json()["id"]
    assert f"Vehicle {vehicle_id} created by editor@example.com" in caplog.text
