"""Tests for /api/v1/content-types endpoint."""


class TestContentTypes:
    def test_lists_all_types_in_order(self, client):
        r = client.get("/api/v1/content-types")

        assert r.status_code == 200
        assert [t["value"] for t in r.json()] == [
            "announce", "sale", "pain_sale", "reminder", "digest",
        ]

    def test_types_have_labels(self, client):
        for info in client.get("/api/v1/content-types").json():
            assert info["label"]
            assert info["description"]
