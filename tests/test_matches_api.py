import pytest


def _match(date, status="upcoming", home="Alexandria", **extra):
    payload = {
        "date": date,
        "time": "19:30",
        "competition": "Championship",
        "home_team": home,
        "away_team": "Dynamo",
        "stadium": "Central",
        "status": status,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def schedule(client, admin_headers):
    matches = [
        _match("2023-05-28", home="U3"),
        _match("2023-05-07", status="completed", home="C2", home_score=2, away_score=0),
        _match("2023-05-15", home="U1"),
        _match("2023-04-30", status="completed", home="C1", home_score=1, away_score=1),
        _match("2023-05-21", home="U2"),
        _match("2023-05-18", status="canceled", home="X"),
    ]
    for payload in matches:
        r = client.post("/api/matches", json=payload, headers=admin_headers)
        assert r.status_code == 201, r.text
    return matches


def test_upcoming_matches_ascending_with_limit(client, schedule):
    r = client.get("/api/matches/upcoming", params={"limit": 2})
    assert r.status_code == 200
    matches = r.json()
    assert [m["home_team"] for m in matches] == ["U1", "U2"]
    assert all(m["status"] == "upcoming" for m in matches)
    assert [m["date"] for m in matches] == ["2023-05-15", "2023-05-21"]


def test_completed_matches_descending(client, schedule):
    matches = client.get("/api/matches/completed").json()
    assert [m["home_team"] for m in matches] == ["C2", "C1"]
    assert matches[0]["home_score"] == 2


def test_full_schedule_is_date_ordered_and_filterable(client, schedule):
    dates = [m["date"] for m in client.get("/api/matches").json()]
    assert dates == sorted(dates)
    assert len(dates) == 6

    canceled = client.get("/api/matches", params={"status": "canceled"}).json()
    assert [m["home_team"] for m in canceled] == ["X"]


def test_limit_must_be_positive(client):
    r = client.get("/api/matches/upcoming", params={"limit": 0})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "limit"


def test_new_match_defaults_to_upcoming(client, admin_headers):
    payload = _match("2023-06-01")
    del payload["status"]
    r = client.post("/api/matches", json=payload, headers=admin_headers)
    assert r.status_code == 201
    assert r.json()["status"] == "upcoming"
    assert r.json()["home_score"] is None


def test_recording_a_result_moves_match_to_results(client, admin_headers, schedule):
    upcoming = client.get("/api/matches/upcoming").json()
    match_id = upcoming[0]["id"]

    r = client.put(
        f"/api/matches/{match_id}",
        json={"status": "completed", "home_score": 3, "away_score": 1},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["date"] == "2023-05-15"

    assert match_id not in [m["id"] for m in client.get("/api/matches/upcoming").json()]
    assert client.get("/api/matches/completed").json()[0]["id"] == match_id


def test_invalid_status_and_date_are_rejected(client, admin_headers):
    r = client.post("/api/matches", json=_match("not-a-date", status="postponed"), headers=admin_headers)
    assert r.status_code == 400
    fields = {error["field"] for error in r.json()["errors"]}
    assert fields == {"date", "status"}


def test_single_match_lookup(client, schedule):
    assert client.get("/api/matches/3").json()["home_team"] == "U1"
    assert client.get("/api/matches/99").status_code == 404
