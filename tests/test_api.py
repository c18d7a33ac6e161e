"""Integration tests for the statements endpoint.

Run with: pytest tests/test_api.py -v
"""

from rest_framework.test import APIClient

URL = "/api/statements"


class TestStatementCreate:
    """Tests for POST /api/statements"""

    def test_returns_statement(self, api_client: APIClient, raw_invoice, raw_plays):
        """Given a valid invoice, returns priced lines and totals."""
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.status_code == 200
        body = response.json()
        assert body["customer"] == "BigCo"
        assert body["total_amount"] == "$1,230.00"
        assert body["total_amount_cents"] == 123000
        assert body["volume_credits"] == 37
        assert [line["play"] for line in body["lines"]] == ["Hamlet", "As You Like It"]
        assert body["lines"][1]["amount"] == "$580.00"
        assert body["text"].splitlines()[0] == "Statement for BigCo"

    def test_unknown_play_type(self, api_client: APIClient, raw_invoice, raw_plays):
        """Given a play of unknown type, returns 422 with the error code."""
        raw_plays["hamlet"]["type"] = "history"
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.status_code == 422
        assert response.json()["code"] == "UNKNOWN_PLAY_TYPE"

    def test_unknown_play(self, api_client: APIClient, raw_invoice, raw_plays):
        del raw_plays["as-like"]
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.status_code == 422
        assert response.json()["code"] == "UNKNOWN_PLAY"

    def test_negative_audience(self, api_client: APIClient, raw_invoice, raw_plays):
        raw_invoice["performances"][0]["audience"] = -3
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_AUDIENCE"

    def test_malformed_body(self, api_client: APIClient):
        """Given a body missing the invoice, returns 400."""
        response = api_client.post(URL, {"plays": {}}, format="json")
        assert response.status_code == 400

    def test_pricing_overrides_from_settings(
        self, api_client: APIClient, raw_invoice, raw_plays, settings
    ):
        settings.THEATER_PRICING = {"tragedy": {"base_amount": 50000}}
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.json()["lines"][0]["amount_cents"] == 75000

    def test_unused_unknown_play_type(self, api_client: APIClient, raw_invoice, raw_plays):
        """Given an unknown-type play no performance uses, still returns 200."""
        raw_plays["henry-v"] = {"name": "Henry V", "type": "history"}
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["total_amount"] == "$1,230.00"

    def test_names_keep_whitespace(self, api_client: APIClient, raw_invoice, raw_plays):
        """Customer and play names are rendered exactly as sent."""
        raw_invoice["customer"] = " BigCo "
        raw_plays["hamlet"]["name"] = "Hamlet "
        response = api_client.post(
            URL, {"invoice": raw_invoice, "plays": raw_plays}, format="json"
        )
        body = response.json()
        assert body["customer"] == " BigCo "
        assert body["text"].splitlines()[:2] == [
            "Statement for  BigCo ",
            "  Hamlet : $650.00 (55 seats)",
        ]
