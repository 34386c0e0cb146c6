import datetime

import pytest


def _news(title, date, **extra):
    payload = {"title": title, "content": "Body", "category": "Club", "date": date}
    payload.update(extra)
    return payload


def _standing(team, position, points):
    return {
        "team": team,
        "position": position,
        "played": 10,
        "won": 5,
        "drawn": 2,
        "lost": 3,
        "goals_for": 15,
        "goals_against": 11,
        "points": points,
    }


def test_news_newest_first_with_limit(client, admin_headers):
    for title, date in [("Old", "2023-04-01"), ("Newest", "2023-05-10"), ("Middle", "2023-05-01")]:
        assert client.post("/api/news", json=_news(title, date), headers=admin_headers).status_code == 201

    assert [n["title"] for n in client.get("/api/news").json()] == ["Newest", "Middle", "Old"]
    assert [n["title"] for n in client.get("/api/news", params={"limit": 2}).json()] == ["Newest", "Middle"]


def test_news_update_and_counters_validation(client, admin_headers):
    client.post("/api/news", json=_news("Transfer", "2023-05-01"), headers=admin_headers)

    r = client.put("/api/news/1", json={"views": 120}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["views"] == 120
    assert r.json()["title"] == "Transfer"

    r = client.put("/api/news/1", json={"views": -1}, headers=admin_headers)
    assert r.status_code == 400
    assert client.get("/api/news/1").json()["views"] == 120


def test_blog_posts_ordered_and_author_resolvable(client, admin_headers):
    author = client.get("/api/user", headers=admin_headers).json()
    for title, date in [("First", "2023-04-20"), ("Second", "2023-05-03")]:
        payload = {
            "title": title,
            "content": "Post body",
            "author_id": author["id"],
            "author_name": author["username"],
            "date": date,
        }
        assert client.post("/api/blog-posts", json=payload, headers=admin_headers).status_code == 201

    posts = client.get("/api/blog-posts").json()
    assert [p["title"] for p in posts] == ["Second", "First"]

    profile = client.get(f"/api/users/{posts[0]['author_id']}").json()
    assert profile["username"] == author["username"]


def test_media_type_filter_and_default_date(client, admin_headers):
    photo = {"type": "photo", "url": "https://example.com/a.jpg", "date": "2023-05-01"}
    video = {"type": "video", "url": "https://example.com/b.mp4", "duration": "03:10"}
    assert client.post("/api/media", json=photo, headers=admin_headers).status_code == 201
    r = client.post("/api/media", json=video, headers=admin_headers)
    assert r.status_code == 201
    assert r.json()["date"] == datetime.date.today().isoformat()

    videos = client.get("/api/media", params={"type": "video"}).json()
    assert [m["url"] for m in videos] == ["https://example.com/b.mp4"]
    assert len(client.get("/api/media").json()) == 2
    assert client.get("/api/media", params={"limit": 1}).json()[0]["type"] == "video"


def test_media_rejects_unknown_type(client, admin_headers):
    r = client.post("/api/media", json={"type": "audio", "url": "x"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "type"


def test_coaches_crud(client, admin_headers):
    payload = {"name": "Andrei", "position": "Head coach", "join_year": 2021}
    assert client.post("/api/coaches", json=payload, headers=admin_headers).status_code == 201

    r = client.put("/api/coaches/1", json={"achievements": "Cup winner"}, headers=admin_headers)
    assert r.json()["achievements"] == "Cup winner"
    assert [c["name"] for c in client.get("/api/coaches").json()] == ["Andrei"]
    assert client.get("/api/coaches/2").json()["detail"] == "Coach not found"


def test_history_ordered_by_year(client, admin_headers):
    for year in (2010, 1995, 2003):
        payload = {"year": year, "title": f"Season {year}", "description": "Milestone"}
        assert client.post("/api/history", json=payload, headers=admin_headers).status_code == 201

    events = client.get("/api/history").json()
    assert [e["year"] for e in events] == [1995, 2003, 2010]
    assert all(e["importance"] == 1 for e in events)


def test_history_importance_bounds(client, admin_headers):
    payload = {"year": 2000, "title": "Big", "description": "Event", "importance": 4}
    assert client.post("/api/history", json=payload, headers=admin_headers).status_code == 400


def test_standings_table_order_and_true_delete(client, admin_headers):
    for team, position, points in [("Third", 3, 15), ("First", 1, 24), ("Second", 2, 20)]:
        r = client.post("/api/standings", json=_standing(team, position, points), headers=admin_headers)
        assert r.status_code == 201

    assert [s["team"] for s in client.get("/api/standings").json()] == ["First", "Second", "Third"]

    assert client.delete("/api/standings/2", headers=admin_headers).status_code == 204
    assert client.get("/api/standings/2").status_code == 404
    assert [s["team"] for s in client.get("/api/standings").json()] == ["Second", "Third"]


def test_standings_reorder_after_update(client, admin_headers):
    client.post("/api/standings", json=_standing("A", 1, 20), headers=admin_headers)
    client.post("/api/standings", json=_standing("B", 2, 18), headers=admin_headers)

    client.put("/api/standings/2", json={"position": 1, "points": 21}, headers=admin_headers)
    client.put("/api/standings/1", json={"position": 2}, headers=admin_headers)

    assert [s["team"] for s in client.get("/api/standings").json()] == ["B", "A"]


MUTATING_ROUTES = [
    ("post", "/api/players"),
    ("put", "/api/players/1"),
    ("delete", "/api/players/1"),
    ("post", "/api/coaches"),
    ("put", "/api/coaches/1"),
    ("delete", "/api/coaches/1"),
    ("post", "/api/matches"),
    ("put", "/api/matches/1"),
    ("delete", "/api/matches/1"),
    ("post", "/api/news"),
    ("put", "/api/news/1"),
    ("delete", "/api/news/1"),
    ("post", "/api/blog-posts"),
    ("put", "/api/blog-posts/1"),
    ("delete", "/api/blog-posts/1"),
    ("post", "/api/media"),
    ("put", "/api/media/1"),
    ("delete", "/api/media/1"),
    ("post", "/api/standings"),
    ("put", "/api/standings/1"),
    ("delete", "/api/standings/1"),
    ("post", "/api/history"),
    ("put", "/api/history/1"),
    ("delete", "/api/history/1"),
]


@pytest.mark.parametrize("method,path", MUTATING_ROUTES)
def test_mutating_routes_require_admin(client, user_headers, method, path):
    kwargs = {} if method == "delete" else {"json": {}}
    assert client.request(method, path, **kwargs).status_code == 403
    assert client.request(method, path, headers=user_headers, **kwargs).status_code == 403
