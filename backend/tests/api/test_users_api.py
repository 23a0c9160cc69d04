"""Users — list, fetch, create and patch.

Tests cover:
    - GET /api/users and /api/users/:username (404 for unknown usernames)
    - POST /api/users requires username, name, avatar_url; duplicate username → 400
    - PATCH /api/users/:username updates name/avatar_url and ignores extras
"""

import pytest


USER_KEYS = {"username", "name", "avatar_url"}
NEW_USER = {
    "username": "testUsername",
    "name": "testName",
    "avatar_url": "www.avatar_url.com",
}


async def test_list_users(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    users = res.json()["users"]
    assert len(users) == 4
    for user in users:
        assert set(user) == USER_KEYS


async def test_get_user(client):
    res = await client.get("/api/users/mallionaire")
    assert res.status_code == 200
    assert res.json()["user"] == {
        "username": "mallionaire",
        "name": "haz",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    }


async def test_get_unknown_user_is_404(client):
    res = await client.get("/api/users/wrong")
    assert res.status_code == 404
    assert res.json() == {"msg": "input 'wrong' not found in 'users' database"}


async def test_post_user(client):
    res = await client.post("/api/users", json=NEW_USER)
    assert res.status_code == 201
    assert res.json()["user"] == NEW_USER

    fetched = await client.get("/api/users/testUsername")
    assert fetched.json()["user"] == NEW_USER


async def test_post_user_ignores_extra_keys(client):
    res = await client.post("/api/users", json={**NEW_USER, "extra": "test extra"})
    assert res.status_code == 201
    assert res.json()["user"] == NEW_USER


@pytest.mark.parametrize(
    "data",
    [
        {"wrong": "wrong key", "name": "testName", "avatar_url": "www.avatar_url.com"},
        {"username": "testUsername", "name": "testName"},
        {"username": 123, "name": "testName", "avatar_url": "www.avatar_url.com"},
        {},
    ],
)
async def test_post_user_with_bad_body_is_400(client, data):
    res = await client.post("/api/users", json=data)
    assert res.status_code == 400
    assert res.json() == {"msg": "Invalid input"}


async def test_post_user_with_taken_username_is_400(client):
    res = await client.post(
        "/api/users", json={**NEW_USER, "username": "mallionaire"},
    )
    assert res.status_code == 400
    assert res.json() == {"msg": "Username already exists"}


async def test_patch_user(client):
    res = await client.patch(
        "/api/users/mallionaire",
        json={"name": "new name", "avatar_url": "www.newurl.com"},
    )
    assert res.status_code == 200
    assert res.json()["user"] == {
        "username": "mallionaire",
        "name": "new name",
        "avatar_url": "www.newurl.com",
    }


async def test_patch_user_ignores_extra_keys(client):
    res = await client.patch(
        "/api/users/mallionaire",
        json={"name": "new name", "avatar_url": "www.newurl.com", "wrong": "wrong"},
    )
    assert res.status_code == 200
    assert set(res.json()["user"]) == USER_KEYS


async def test_patch_user_name_only_keeps_avatar(client):
    res = await client.patch("/api/users/dav3rid", json={"name": "david"})
    user = res.json()["user"]
    assert user["name"] == "david"
    assert user["avatar_url"].endswith("placeholder-user.png")


async def test_patch_unknown_user_is_404(client):
    res = await client.patch("/api/users/nobody", json={"name": "x"})
    assert res.status_code == 404
    assert res.json()["msg"] == "input 'nobody' not found in 'users' database"
