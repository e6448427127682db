from ecoevents.config import settings
from ecoevents.schemas.comment import COMMENT_MAX_LENGTH


def test_comment_round_trip(client, create_event, create_comment):
    """Test that a new comment reads back unchanged, active and not edited"""
    event = create_event()
    comment = create_comment(event["id"], content="X", author="Lucía")

    response = client.get(f"/comments/{comment['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "X"
    assert data["author"] == "Lucía"
    assert data["event_id"] == event["id"]
    assert data["active"] is True
    assert data["edited"] is False


def test_comment_without_author_uses_placeholder(client, create_event, create_comment):
    event = create_event()

    missing = create_comment(event["id"])
    blank = create_comment(event["id"], author="   ")

    assert missing["author"] == settings.DEFAULT_COMMENT_AUTHOR == "anonymous"
    assert blank["author"] == "anonymous"


def test_admin_comment_uses_administrator_placeholder(client, create_event):
    event = create_event()

    response = client.post("/comments/as_admin", json={"event_id": event["id"], "content": "Aforo completo."})

    assert response.status_code == 201
    assert response.json()["author"] == settings.ADMIN_COMMENT_AUTHOR == "administrator"


def test_admin_comment_keeps_given_author(client, create_event):
    event = create_event()
    response = client.post(
        "/comments/as_admin",
        json={"event_id": event["id"], "content": "Cambio de sala.", "author": "EcoMadrid"},
    )
    assert response.json()["author"] == "EcoMadrid"


def test_comment_on_missing_event_is_rejected(client):
    response = client.post("/comments", json={"event_id": 999, "content": "¿Hola?"})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail[0]["loc"] == ["body", "event_id"]
    assert "999" in detail[0]["msg"]


def test_comment_with_out_of_range_event_id_is_rejected(client):
    response = client.post("/comments", json={"event_id": 99999999999999999999, "content": "¿Hola?"})

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "event_id"]


def test_comment_content_bounds(client, create_event):
    event = create_event()

    at_limit = client.post("/comments", json={"event_id": event["id"], "content": "a" * COMMENT_MAX_LENGTH})
    over_limit = client.post("/comments", json={"event_id": event["id"], "content": "a" * (COMMENT_MAX_LENGTH + 1)})
    blank = client.post("/comments", json={"event_id": event["id"], "content": "   "})
    empty = client.post("/comments", json={"event_id": event["id"], "content": ""})

    assert at_limit.status_code == 201
    assert over_limit.status_code == 422
    assert blank.status_code == 422
    assert empty.status_code == 422


def test_get_comment_not_found(client):
    response = client.get("/comments/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Comment with id 999 not found."


def test_out_of_range_comment_id_is_rejected(client):
    assert client.get("/comments/99999999999999999999").status_code == 422
    assert client.patch("/comments/0", json={"content": "Hola"}).status_code == 422
    assert client.delete("/comments/-1").status_code == 422
    assert client.get("/events/99999999999999999999/comments").status_code == 422


def test_edit_sets_edited_flag(client, create_event, create_comment):
    comment = create_comment(create_event()["id"], content="Primera versión")

    response = client.patch(f"/comments/{comment['id']}", json={"content": "Segunda versión"})

    assert response.status_code == 200
    assert response.json()["content"] == "Segunda versión"
    assert response.json()["edited"] is True


def test_edit_with_identical_content_still_sets_edited(client, create_event, create_comment):
    comment = create_comment(create_event()["id"], content="Sin cambios")

    response = client.patch(f"/comments/{comment['id']}", json={"content": "Sin cambios"})

    assert response.status_code == 200
    assert response.json()["edited"] is True
    assert client.get(f"/comments/{comment['id']}").json()["edited"] is True


def test_edit_validation_and_not_found(client, create_event, create_comment):
    comment = create_comment(create_event()["id"])

    assert client.patch(f"/comments/{comment['id']}", json={"content": ""}).status_code == 422
    assert client.patch(f"/comments/{comment['id']}", json={}).status_code == 422
    assert client.patch("/comments/999", json={"content": "Hola"}).status_code == 404


def test_soft_delete_keeps_row_but_hides_it(client, create_event, create_comment):
    event = create_event()
    kept = create_comment(event["id"], content="Visible")
    hidden = create_comment(event["id"], content="Oculto")

    response = client.delete(f"/comments/{hidden['id']}")

    assert response.status_code == 200
    assert response.json()["active"] is False

    by_id = client.get(f"/comments/{hidden['id']}")
    assert by_id.status_code == 200
    assert by_id.json()["active"] is False
    assert by_id.json()["content"] == "Oculto"

    public_ids = [c["id"] for c in client.get(f"/events/{event['id']}/comments").json()]
    moderation_ids = [c["id"] for c in client.get(f"/events/{event['id']}/comments?include_inactive=true").json()]
    assert public_ids == [kept["id"]]
    assert sorted(moderation_ids) == sorted([kept["id"], hidden["id"]])


def test_soft_delete_not_found(client):
    assert client.delete("/comments/999").status_code == 404


def test_restore_reactivates_without_touching_edited(client, create_event, create_comment):
    comment = create_comment(create_event()["id"])
    client.patch(f"/comments/{comment['id']}", json={"content": "Corregido"})
    client.delete(f"/comments/{comment['id']}")

    response = client.patch(f"/comments/{comment['id']}/restore")

    assert response.status_code == 200
    assert response.json()["active"] is True
    assert response.json()["edited"] is True
    assert client.patch("/comments/999/restore").status_code == 404


def test_event_comments_newest_first(client, create_event, create_comment):
    event = create_event()
    older = create_comment(event["id"], content="Primero")
    newer = create_comment(event["id"], content="Segundo")

    response = client.get(f"/events/{event['id']}/comments")

    assert [c["id"] for c in response.json()] == [newer["id"], older["id"]]


def test_event_comments_for_missing_event(client):
    assert client.get("/events/999/comments").status_code == 404
