from wordboard.app.board.weights import frequency


def _make_list(client, name="Feelings", **extra):
    resp = client.post("/api/lists", json={"name": name, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


def _add_word(client, list_id, text, weight=1):
    resp = client.post("/api/words", json={"list_id": list_id, "text": text, "weight": weight})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_fetch_list(client):
    created = _make_list(client, "Basic Words", theme="blue", order=1)
    assert created["slug"] == "basic-words"
    assert created["theme"] == "blue"

    assert client.get("/api/lists/latest").json()["id"] == created["id"]
    assert client.get("/api/lists/by-slug/basic-words").json()["id"] == created["id"]
    assert client.get("/api/lists/by-slug/nope").status_code == 404


def test_latest_without_lists_is_404(client):
    assert client.get("/api/lists/latest").status_code == 404


def test_list_validation(client):
    assert client.post("/api/lists", json={"name": ""}).status_code == 422
    assert client.post("/api/lists", json={"name": "x" * 101}).status_code == 422
    assert client.post("/api/lists", json={"name": "ok", "slug": "Bad Slug"}).status_code == 422


def test_duplicate_slug_is_409(client):
    _make_list(client, "Fruits")
    assert client.post("/api/lists", json={"name": "fruits"}).status_code == 409


def test_paginated_listing(client):
    ids = {_make_list(client, f"List {i}")["id"] for i in range(3)}

    first = client.get("/api/lists", params={"limit": 2}).json()
    assert len(first["items"]) == 2
    assert first["next_cursor"]

    second = client.get("/api/lists", params={"limit": 2, "cursor": first["next_cursor"]}).json()
    assert len(second["items"]) == 1
    assert second["next_cursor"] is None

    assert {item["id"] for item in first["items"] + second["items"]} == ids
    assert client.get("/api/lists", params={"limit": 0}).status_code == 422
    assert client.get("/api/lists", params={"cursor": "missing"}).status_code == 400


def test_search_lists(client):
    _make_list(client, "Animals")
    _make_list(client, "Fruits")
    items = client.get("/api/lists", params={"search": "fru"}).json()["items"]
    assert [item["name"] for item in items] == ["Fruits"]


def test_rename_and_delete_list(client):
    created = _make_list(client, "Draft")
    _add_word(client, created["id"], "word")

    renamed = client.patch(f"/api/lists/{created['id']}", json={"name": "Final"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Final"
    assert renamed.json()["slug"] == "draft"

    assert client.delete(f"/api/lists/{created['id']}").json() == {"ok": True}
    assert client.delete(f"/api/lists/{created['id']}").status_code == 404
    assert client.get(f"/api/lists/{created['id']}/words").status_code == 404
    assert client.patch("/api/lists/missing", json={"name": "x"}).status_code == 404


def test_word_lifecycle(client):
    wl = _make_list(client)
    joy = _add_word(client, wl["id"], "joy", 5)
    _add_word(client, wl["id"], "anger", 3)

    words = client.get(f"/api/lists/{wl['id']}/words").json()["items"]
    assert [w["text"] for w in words] == ["joy", "anger"]

    dup = client.post("/api/words", json={"list_id": wl["id"], "text": "joy", "weight": 2})
    assert dup.status_code == 409

    updated = client.put(f"/api/words/{joy['id']}", json={"text": "delight", "weight": 999})
    assert updated.status_code == 200
    assert updated.json()["weight"] == 999

    assert client.put(f"/api/words/{joy['id']}", json={"text": "anger", "weight": 1}).status_code == 409
    assert client.delete(f"/api/words/{joy['id']}").json() == {"ok": True}
    assert client.delete(f"/api/words/{joy['id']}").status_code == 404


def test_word_validation(client):
    wl = _make_list(client)
    for body in (
        {"list_id": wl["id"], "text": "", "weight": 1},
        {"list_id": wl["id"], "text": "   ", "weight": 1},
        {"list_id": wl["id"], "text": "x" * 201, "weight": 1},
        {"list_id": wl["id"], "text": "ok", "weight": 0},
        {"list_id": wl["id"], "text": "ok", "weight": 1000},
        {"list_id": wl["id"], "text": "ok", "weight": 2.5},
    ):
        assert client.post("/api/words", json=body).status_code == 422, body

    created = client.post("/api/words", json={"list_id": wl["id"], "text": "ok"})
    assert created.json()["weight"] == 1
    assert client.post("/api/words", json={"list_id": "missing", "text": "ok"}).status_code == 404


def test_list_with_words_by_slug(client):
    wl = _make_list(client, "Sky")
    _add_word(client, wl["id"], "cloud", 2)
    _add_word(client, wl["id"], "bird", 2)
    _add_word(client, wl["id"], "sun", 9)

    full = client.get("/api/lists/by-slug/sky/full").json()
    assert full["id"] == wl["id"]
    assert [w["text"] for w in full["words"]] == ["sun", "bird", "cloud"]
    assert client.get("/api/lists/by-slug/none/full").status_code == 404


def test_board_without_lists_is_empty(client):
    assert client.get("/api/board").json() == {"list_id": None, "lane_count": 8, "items": []}


def test_board_for_latest_list(client):
    wl = _make_list(client)
    _add_word(client, wl["id"], "light", 1)
    _add_word(client, wl["id"], "heavy", 999)

    board = client.get("/api/board", params={"height": 360, "seed": 3}).json()
    assert board["list_id"] == wl["id"]
    assert board["lane_count"] == 3
    assert len(board["items"]) == frequency(1) + frequency(999)
    assert all(0 <= item["lane"] < 3 for item in board["items"])
    assert all(item["delay_sec"] <= 0 for item in board["items"])

    again = client.get("/api/board", params={"height": 360, "seed": 3}).json()
    assert again == board


def test_board_density_and_speed(client):
    wl = _make_list(client)
    _add_word(client, wl["id"], "heavy", 999)
    board = client.get(
        "/api/board",
        params={"list_id": wl["id"], "density": 0.5, "speed_min": 5, "speed_max": 10, "seed": 1},
    ).json()
    assert len(board["items"]) == 3
    assert all(item["duration_sec"] == 10 for item in board["items"])
    assert client.get("/api/board", params={"density": -1}).status_code == 422


def test_board_unknown_list(client):
    assert client.get("/api/board", params={"list_id": "missing"}).status_code == 404


def test_home_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "No word lists yet" in resp.text

    wl = _make_list(client, "Feelings", theme="pink")
    _add_word(client, wl["id"], "joy", 4)
    resp = client.get("/")
    assert "Feelings" in resp.text
    assert "joy" in resp.text
    assert "board-item" in resp.text


def test_list_page(client):
    _make_list(client, "Colors")
    assert client.get("/lists/colors").status_code == 200
    assert client.get("/lists/unknown").status_code == 404


def test_board_density_is_capped(client):
    wl = _make_list(client)
    _add_word(client, wl["id"], "heavy", 999)
    assert client.get("/api/board", params={"density": 11}).status_code == 422
    assert client.get("/api/board", params={"density": 1e308}).status_code == 422
    board = client.get("/api/board", params={"density": 10, "seed": 2}).json()
    assert len(board["items"]) == 60
