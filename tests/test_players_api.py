def test_admin_creates_and_reads_player(client, admin_headers, player_payload):
    r = client.post("/api/players", json=player_payload, headers=admin_headers)
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["id"] == 1
    assert created["name"] == "Ivan Petrov"
    assert created["goals"] == 0

    r = client.get("/api/players/1")
    assert r.status_code == 200
    assert r.json() == created


def test_partial_update_keeps_other_fields(client, admin_headers, player_payload):
    created = client.post("/api/players", json=player_payload, headers=admin_headers).json()

    r = client.put("/api/players/1", json={"goals": 5}, headers=admin_headers)
    assert r.status_code == 200, r.text
    updated = r.json()
    assert updated["goals"] == 5
    assert {k: v for k, v in updated.items() if k != "goals"} == {
        k: v for k, v in created.items() if k != "goals"
    }


def test_empty_update_returns_record_unchanged(client, admin_headers, player_payload):
    created = client.post("/api/players", json=player_payload, headers=admin_headers).json()
    r = client.put("/api/players/1", json={}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == created


def test_non_admin_delete_is_forbidden_and_record_survives(client, user_headers, admin_headers, player_payload):
    created = client.post("/api/players", json=player_payload, headers=admin_headers).json()

    r = client.delete("/api/players/1", headers=user_headers)
    assert r.status_code == 403
    assert r.json()["detail"] == "Access denied"

    r = client.get("/api/players/1")
    assert r.status_code == 200
    assert r.json() == created


def test_admin_delete_then_not_found(client, admin_headers, player_payload):
    client.post("/api/players", json=player_payload, headers=admin_headers)

    r = client.delete("/api/players/1", headers=admin_headers)
    assert r.status_code == 204
    assert r.content == b""

    assert client.get("/api/players/1").status_code == 404
    assert client.delete("/api/players/1", headers=admin_headers).status_code == 404


def test_anonymous_create_is_rejected_before_validation(client, storage):
    r = client.post("/api/players", json={"name": 123})
    assert r.status_code == 403
    assert storage.players.list() == []


def test_rejected_update_leaves_store_unchanged(client, admin_headers, user_headers, player_payload, storage):
    client.post("/api/players", json=player_payload, headers=admin_headers)
    before = storage.players.get(1)

    r = client.put("/api/players/1", json={"goals": 99}, headers=user_headers)
    assert r.status_code == 403
    assert storage.players.get(1) == before


def test_invalid_token_is_treated_as_anonymous(client, player_payload):
    r = client.post(
        "/api/players",
        json=player_payload,
        headers={"Authorization": "Bearer not.a.token"},
    )
    assert r.status_code == 403


def test_create_validation_reports_fields(client, admin_headers):
    r = client.post("/api/players", json={"name": "Only name", "number": -1}, headers=admin_headers)
    assert r.status_code == 400
    body = r.json()
    assert body["detail"] == "Validation failed"
    fields = {error["field"] for error in body["errors"]}
    assert {"position", "number", "age"} <= fields


def test_update_rejects_null_for_required_field(client, admin_headers, player_payload):
    client.post("/api/players", json=player_payload, headers=admin_headers)
    r = client.put("/api/players/1", json={"name": None}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "name"


def test_update_allows_clearing_optional_field(client, admin_headers, player_payload):
    payload = dict(player_payload, image_url="https://example.com/ivan.jpg")
    client.post("/api/players", json=payload, headers=admin_headers)
    r = client.put("/api/players/1", json={"image_url": None}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["image_url"] is None


def test_update_unknown_player_is_404(client, admin_headers):
    r = client.put("/api/players/5", json={"goals": 1}, headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Player not found"


def test_non_numeric_id_is_a_client_error(client):
    assert client.get("/api/players/abc").status_code == 400


def test_list_players_filters_by_position(client, admin_headers, player_payload):
    client.post("/api/players", json=player_payload, headers=admin_headers)
    client.post(
        "/api/players",
        json={"name": "Alexander Ivanov", "position": "Goalkeeper", "number": 1, "age": 28},
        headers=admin_headers,
    )

    assert [p["name"] for p in client.get("/api/players").json()] == ["Ivan Petrov", "Alexander Ivanov"]
    goalkeepers = client.get("/api/players", params={"position": "Goalkeeper"}).json()
    assert [p["number"] for p in goalkeepers] == [1]


def test_malformed_json_is_reported_against_body(client, admin_headers, storage):
    headers = dict(admin_headers, **{"Content-Type": "application/json"})
    r = client.post("/api/players", content="{bad", headers=headers)
    assert r.status_code == 400
    errors = r.json()["errors"]
    assert [error["field"] for error in errors] == ["body"]
    assert errors[0]["type"] == "json_invalid"
    assert storage.players.list() == []


def test_malformed_json_from_non_admin_changes_nothing(client, user_headers, storage):
    headers = dict(user_headers, **{"Content-Type": "application/json"})
    r = client.post("/api/players", content="{bad", headers=headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "body"
    assert storage.players.list() == []
