"""
Comment API tests: listing, posting and the offer rating they drive.
"""

from conftest import auth_header, seed_comment, seed_offer, seed_user

MISSING_ID = "9d2c6b1a-8e7f-4a3b-b5c4-1d0e9f8a7b6c"


def test_post_comment_updates_rating(client, store, owner, guest):
    offer = seed_offer(store, owner)

    for rating in (2, 4, 5):
        response = client.post(
            f"/offers/{offer.id}/comments",
            json={"text": "Would stay again", "rating": rating},
            headers=auth_header(guest),
        )
        assert response.status_code == 201

    body = client.get(f"/offers/{offer.id}").json()
    assert body["rating"] == 3.7
    assert body["commentsCount"] == 3


def test_post_comment_returns_comment(client, store, owner, guest):
    offer = seed_offer(store, owner)

    response = client.post(
        f"/offers/{offer.id}/comments",
        json={"text": "Great location", "rating": 5},
        headers=auth_header(guest),
    )

    body = response.json()
    assert body["text"] == "Great location"
    assert body["rating"] == 5
    assert body["offerId"] == offer.id
    assert body["userId"] == guest.id


def test_post_comment_requires_auth(client, store, owner):
    offer = seed_offer(store, owner)

    response = client.post(
        f"/offers/{offer.id}/comments", json={"text": "Anonymous note", "rating": 3}
    )

    assert response.status_code == 401
    assert store.comments == {}


def test_post_comment_validation(client, store, owner, guest):
    offer = seed_offer(store, owner)

    response = client.post(
        f"/offers/{offer.id}/comments",
        json={"text": "Bad", "rating": 0},
        headers=auth_header(guest),
    )

    assert response.status_code == 400
    assert {v["field"] for v in response.json()["details"]} == {"text", "rating"}
    assert store.offers[offer.id].comments_count == 0


def test_post_comment_on_missing_offer_is_404(client, store, guest):
    response = client.post(
        f"/offers/{MISSING_ID}/comments",
        json={"text": "Where is it?", "rating": 3},
        headers=auth_header(guest),
    )

    assert response.status_code == 404
    assert store.comments == {}


def test_list_comments_newest_first(client, store, owner, guest):
    offer = seed_offer(store, owner)
    first = seed_comment(store, offer, guest, 3)
    second = seed_comment(store, offer, guest, 4)
    second.created_at = first.created_at.replace(year=first.created_at.year + 1)

    response = client.get(f"/offers/{offer.id}/comments")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [second.id, first.id]


def test_list_comments_only_for_that_offer(client, store, owner, guest):
    offer = seed_offer(store, owner)
    other = seed_offer(store, owner)
    seed_comment(store, other, guest, 2)

    assert client.get(f"/offers/{offer.id}/comments").json() == []


def test_list_comments_of_missing_offer_is_404(client):
    assert client.get(f"/offers/{MISSING_ID}/comments").status_code == 404


def test_list_comments_invalid_id_is_400(client):
    assert client.get("/offers/123/comments").status_code == 400


def test_anyone_can_comment_on_any_offer(client, store, owner):
    offer = seed_offer(store, owner)
    stranger = seed_user(store, "stranger@example.com")

    response = client.post(
        f"/offers/{offer.id}/comments",
        json={"text": "Own experience", "rating": 4},
        headers=auth_header(stranger),
    )

    assert response.status_code == 201


def test_post_comment_by_deleted_user_is_401(client, store, owner):
    offer = seed_offer(store, owner)
    ghost = seed_user(store, "ghost@example.com")
    headers = auth_header(ghost)
    del store.users[ghost.id]

    response = client.post(
        f"/offers/{offer.id}/comments",
        json={"text": "Posted after leaving", "rating": 4},
        headers=headers,
    )

    assert response.status_code == 401
    assert response.json()["kind"] == "UNAUTHORIZED"
    assert store.comments == {}
    assert store.offers[offer.id].comments_count == 0


# ==================== AUTHORS ====================


def test_comments_carry_author(client, store, owner, guest):
    offer = seed_offer(store, owner)
    seed_comment(store, offer, guest, 4)
    seed_comment(store, offer, owner, 5)

    body = client.get(f"/offers/{offer.id}/comments").json()

    authors = {c["userId"]: c["owner"] for c in body}
    assert authors[guest.id]["email"] == "guest@example.com"
    assert authors[owner.id]["email"] == "host@example.com"
    assert "passwordHash" not in authors[guest.id]


def test_posted_comment_carries_author(client, store, owner, guest):
    offer = seed_offer(store, owner)

    body = client.post(
        f"/offers/{offer.id}/comments",
        json={"text": "Lovely hosts", "rating": 5},
        headers=auth_header(guest),
    ).json()

    assert body["owner"]["email"] == guest.email
    assert body["owner"]["id"] == guest.id
