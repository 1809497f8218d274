"""API tests for tag endpoints."""

from uuid import uuid4

from okozukai.domain.budgeting.services import TAG_COLOR_PALETTE


class TestTagEndpoints:
    def test_colors_assigned_round_robin(self, create_tag):
        first = create_tag("Groceries")
        second = create_tag("Transit")

        assert first["color"] == TAG_COLOR_PALETTE[0]
        assert second["color"] == TAG_COLOR_PALETTE[1]

    def test_list_sorted_by_name(self, test_client, api_v1_prefix, create_tag):
        create_tag("Rent")
        create_tag("Food")

        response = test_client.get(f"{api_v1_prefix}/tags")

        assert [t["name"] for t in response.json()] == ["Food", "Rent"]

    def test_duplicate_after_trim_is_409(self, test_client, api_v1_prefix, create_tag):
        create_tag("Food")

        response = test_client.post(f"{api_v1_prefix}/tags", json={"name": "  Food "})

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_TAG"

    def test_rename_rules(self, test_client, api_v1_prefix, create_tag):
        food = create_tag("Food")
        create_tag("Rent")
        url = f"{api_v1_prefix}/tags/{food['id']}"

        assert test_client.put(url, json={"name": "Food"}).status_code == 200
        conflict = test_client.put(url, json={"name": "Rent"})
        assert conflict.status_code == 409

        renamed = test_client.put(url, json={"name": "Dining"})
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Dining"
        assert renamed.json()["color"] == food["color"]

    def test_delete_detaches_from_transactions(
        self,
        test_client,
        api_v1_prefix,
        create_journal,
        create_tag,
        create_transaction,
    ):
        journal = create_journal()
        food = create_tag("Food")
        txn = create_transaction(
            journal["id"],
            "Out",
            "9.99",
            "2026-01-05T12:00:00Z",
            tag_ids=[food["id"]],
        )

        response = test_client.delete(f"{api_v1_prefix}/tags/{food['id']}")

        assert response.status_code == 204
        reloaded = test_client.get(f"{api_v1_prefix}/transactions/{txn['id']}")
        assert reloaded.json()["tags"] == []

    def test_unknown_tag_is_404(self, test_client, api_v1_prefix):
        unknown = uuid4()

        assert test_client.get(f"{api_v1_prefix}/tags/{unknown}").status_code == 404
        assert test_client.delete(f"{api_v1_prefix}/tags/{unknown}").status_code == 404
