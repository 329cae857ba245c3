"""End-to-end tests through the HTTP API."""
import json
import re


def register(client, form, files=None):
    return client.post("/api/register", data=form, files=files)


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "operational"

    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert health["collections"] == {"tourists": 0, "checkins": 0, "reports": 0, "alerts": 0}


def test_register_issues_tid(client, asha_form):
    response = register(client, asha_form)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    tourist = body["tourist"]
    assert re.fullmatch(r"TID\d{5}", tourist["id"])
    assert tourist["full_name"] == "Asha Rao"
    assert tourist["revoked"] is False
    assert tourist["id"] in body["message"]


def test_register_missing_fields(client, asha_form):
    form = dict(asha_form, email="", nationality="  ")

    response = register(client, form)

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "message": "Please fill all required fields.",
        "missing": ["email", "nationality"],
    }
    assert client.get("/api/stats").json()["issued"] == 0


def test_register_with_photo_and_rows(client, asha_form, png_bytes):
    form = dict(
        asha_form,
        itinerary=json.dumps([{"location": "Taj Mahal", "date": "2024-01-03", "type": "Sightseeing"}]),
        emergency_contacts=json.dumps([{"name": "Ravi", "relationship": "Brother", "phone": "99"}]),
    )

    response = register(client, form, files={"photo": ("me.png", png_bytes, "image/png")})

    assert response.status_code == 200
    tourist = response.json()["tourist"]
    assert tourist["photo"].startswith("data:image/png;base64,")
    assert tourist["itinerary"][0]["type"] == "Sightseeing"
    assert tourist["emergency_contacts"][0]["name"] == "Ravi"


def test_register_with_unreadable_photo(client, asha_form):
    response = register(client, asha_form, files={"photo": ("me.png", b"not a png", "image/png")})

    assert response.status_code == 400
    assert response.json()["detail"] == "Error processing image. Registration failed."
    assert client.get("/api/tourists").json() == []


def test_register_with_oversized_dimensions(client, asha_form, huge_png_bytes):
    response = register(client, asha_form, files={"photo": ("big.png", huge_png_bytes, "image/png")})

    assert response.status_code == 400
    assert response.json()["detail"] == "Error processing image. Registration failed."
    assert client.get("/api/stats").json()["issued"] == 0


def test_register_with_malformed_itinerary(client, asha_form):
    response = register(client, dict(asha_form, itinerary="{not json"))

    assert response.status_code == 422
    assert client.get("/api/stats").json()["issued"] == 0


def test_tourist_lookup_card_and_revoke(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]

    assert client.get(f"/api/tourists/{tourist_id}").json()["email"] == "a@x.com"
    assert client.get("/api/tourists/TID00000").status_code == 404

    card = client.get(f"/api/tourists/{tourist_id}/card").json()
    assert card["name"] == "ASHA RAO"
    assert card["status"] == "ACTIVE"
    assert client.get("/api/tourists/latest/card").json()["id"] == tourist_id

    revoked = client.post(f"/api/tourists/{tourist_id}/revoke").json()
    assert revoked["tourist"]["status"] == "Revoked"
    assert client.get(f"/api/tourists/{tourist_id}/card").json()["status"] == "REVOKED"
    assert client.get("/api/stats").json() == {"issued": 1, "active": 0, "checked_in": 0}


def test_latest_card_without_registrations(client):
    response = client.get("/api/tourists/latest/card")

    assert response.status_code == 404
    assert "No Digital IDs" in response.json()["detail"]


def test_check_in_and_out_flow(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]

    response = client.post("/api/checkins", json={"tourist_id": f" {tourist_id} ", "location": "Delhi"})
    assert response.status_code == 200
    event = response.json()["event"]
    assert event["status"] == "Checked-in"
    assert client.get("/api/stats").json()["checked_in"] == 1
    assert client.get("/api/tourists").json()[0]["checked_in"] is True

    checkout_url = f"/api/checkins/{event['event_id']}/checkout"
    first = client.post(checkout_url, json={"tourist_id": tourist_id}).json()
    second = client.post(checkout_url, json={"tourist_id": tourist_id}).json()

    assert first["checked_out"] is True
    assert first["event"]["status"] == "Checked-out"
    assert second == {"checked_out": False, "event": None}
    assert client.get("/api/stats").json()["checked_in"] == 0
    assert client.get("/api/tourists").json()[0]["checked_in"] is False


def test_check_in_unknown_id(client):
    response = client.post("/api/checkins", json={"tourist_id": "unknown", "location": "Delhi"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid or revoked Digital ID."
    assert client.get("/api/checkins").json() == {"total": 0, "results": []}


def test_search_checkins(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]
    for location in ("Delhi", "Agra", "Jaipur"):
        client.post("/api/checkins", json={"tourist_id": tourist_id, "location": location})

    everything = client.get("/api/checkins").json()
    assert [e["location"] for e in everything["results"]] == ["Jaipur", "Agra", "Delhi"]

    filtered = client.get("/api/checkins", params={"search": "AGR"}).json()
    assert filtered["total"] == 1
    assert filtered["results"][0]["location"] == "Agra"


def test_file_report_and_list(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]

    response = client.post("/api/reports", json={
        "tourist_id": tourist_id,
        "type": "Theft",
        "description": "Bag stolen",
        "location": "Delhi",
        "date": "2024-01-05",
    })

    assert response.status_code == 200
    assert response.json()["message"] == f"e-FIR (Theft) submitted successfully for ID: {tourist_id}."
    reports = client.get("/api/reports").json()
    assert len(reports) == 1
    assert reports[0]["name"] == "Asha Rao"


def test_file_report_on_revoked_id(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]
    client.post(f"/api/tourists/{tourist_id}/revoke")

    response = client.post("/api/reports", json={"tourist_id": tourist_id, "type": "Theft"})

    assert response.status_code == 404
    assert client.get("/api/reports").json() == []


def test_sos(client, asha_form):
    tourist_id = register(client, asha_form).json()["tourist"]["id"]

    response = client.post("/api/sos", json={"tourist_id": tourist_id})

    assert response.status_code == 200
    assert response.json()["message"].startswith(f"SOS triggered for Asha Rao (ID: {tourist_id})!")
    assert len(client.get("/api/sos/alerts").json()) == 1

    assert client.post("/api/sos", json={"tourist_id": "nope"}).status_code == 404
