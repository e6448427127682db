import pytest

from ecoevents.crud import faq_crud
from ecoevents.exceptions import ValidationFailedError
from ecoevents.schemas.faq import FaqReorderItemSchema


def test_reorder_applies_every_item(client, create_faq):
    first = create_faq(order=1)
    second = create_faq(order=2)

    response = client.post(
        "/faqs/reorder",
        json={"items": [{"id": first["id"], "order": 3}, {"id": second["id"], "order": 1}]},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "updated": 2}
    assert client.get(f"/faqs/{first['id']}").json()["order"] == 3
    assert client.get(f"/faqs/{second['id']}").json()["order"] == 1
    assert [item["id"] for item in client.get("/faqs").json()["items"]] == [second["id"], first["id"]]


def test_reorder_with_unknown_id_applies_nothing(client, create_faq):
    """The batch is atomic: an earlier valid item must not stay applied"""
    known = create_faq(order=1)

    response = client.post(
        "/faqs/reorder",
        json={"items": [{"id": known["id"], "order": 9}, {"id": 999, "order": 0}]},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert [error["loc"] for error in detail] == [["body", "items", 1, "id"]]
    assert client.get(f"/faqs/{known['id']}").json()["order"] == 1


def test_reorder_rejects_empty_batch(client):
    assert client.post("/faqs/reorder", json={"items": []}).status_code == 422


def test_reorder_rejects_negative_order(client, create_faq):
    faq = create_faq()
    response = client.post("/faqs/reorder", json={"items": [{"id": faq["id"], "order": -2}]})
    assert response.status_code == 422


@pytest.mark.parametrize("bad_id", [0, 2**63, 99999999999999999999])
def test_reorder_rejects_out_of_range_id(client, create_faq, bad_id):
    faq = create_faq(order=3)

    response = client.post("/faqs/reorder", json={"items": [{"id": faq["id"], "order": 1}, {"id": bad_id, "order": 0}]})

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "items", 1, "id"]
    assert client.get(f"/faqs/{faq['id']}").json()["order"] == 3


def test_reorder_duplicate_id_last_entry_wins(client, create_faq):
    faq = create_faq(order=0)

    response = client.post(
        "/faqs/reorder",
        json={"items": [{"id": faq["id"], "order": 4}, {"id": faq["id"], "order": 6}]},
    )

    assert response.json() == {"success": True, "updated": 1}
    assert client.get(f"/faqs/{faq['id']}").json()["order"] == 6


def test_reorder_crud_reports_every_missing_item(run_db, create_faq):
    faq = create_faq()
    items = [
        FaqReorderItemSchema(id=404, order=1),
        FaqReorderItemSchema(id=faq["id"], order=2),
        FaqReorderItemSchema(id=405, order=3),
    ]

    with pytest.raises(ValidationFailedError) as exc_info:
        run_db(lambda db: faq_crud.reorder_faqs(db, items))

    assert [error["loc"][2] for error in exc_info.value.errors] == [0, 2]
