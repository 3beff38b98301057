"""
Tests for the HTTP API.

These tests validate:
- Health and catalog endpoints
- Parse, suggest, preview and validate round trips with camelCase JSON
- Strict parsing and query length limits
- Domain updates, with and without an admin key
- Request id propagation, security headers and error sanitization
"""

import logging

from logquery.api.deps import sanitize_error_message
from logquery.config import settings


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_security_headers(self, client):
        response = client.get("/health")
        assert "x-request-id" in response.headers
        assert response.headers["x-content-type-options"] == "nosniff"


class TestRequestTracing:
    def test_incoming_request_id_reused(self, client):
        response = client.get("/health", headers={"X-Request-Id": "ui-7f3a.42_b"})
        assert response.headers["x-request-id"] == "ui-7f3a.42_b"

    def test_malformed_request_id_replaced(self, client):
        for bad in ["has spaces", "x" * 129, "../etc/passwd"]:
            response = client.get("/health", headers={"X-Request-Id": bad})
            assert response.headers["x-request-id"] != bad
            assert len(response.headers["x-request-id"]) == 36

    def test_generated_ids_are_unique(self, client):
        first = client.get("/health").headers["x-request-id"]
        second = client.get("/health").headers["x-request-id"]
        assert first != second

    def test_no_hsts_outside_production(self, client):
        response = client.get("/health")
        assert "strict-transport-security" not in response.headers
        assert response.headers["x-frame-options"] == "DENY"

    def test_hsts_in_production(self, client, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")
        monkeypatch.setattr(settings, "debug", False)
        response = client.get("/health")
        assert response.headers["strict-transport-security"].startswith("max-age=")


class TestErrorSanitization:
    def test_unexpected_error_is_generic_and_logged_once(self, caplog):
        with caplog.at_level(logging.ERROR, logger="logquery"):
            message = sanitize_error_message(RuntimeError("db password=hunter2"))

        assert "hunter2" not in message
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].exc_info is not None

    def test_known_error_passes_through(self):
        error = ValueError("Query too long. Maximum length: 10 characters")
        assert sanitize_error_message(error) == str(error)


class TestParseEndpoint:
    def test_parse(self, client):
        response = client.post("/v1/query/parse", json={"query": "level:error cost:>0.01 refund"})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["parsed"]["textSearch"] == "refund"
        assert body["parsed"]["filters"][1]["originalValue"] == ">0.01"
        assert body["params"] == {"level": "error", "cost_>_0.01": "true", "search": "refund"}

    def test_incomplete_query_flagged(self, client):
        response = client.post("/v1/query/parse", json={"query": "level:"})
        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_strict_rejects_incomplete(self, client):
        response = client.post("/v1/query/parse", json={"query": "level:", "strict": True})
        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_query_too_long(self, client, monkeypatch):
        monkeypatch.setattr(settings, "max_query_length", 10)
        response = client.post("/v1/query/parse", json={"query": "x" * 11})
        assert response.status_code == 413
        assert "Query too long" in response.json()["error"]


class TestAutocompleteEndpoints:
    def test_suggest(self, client):
        response = client.post("/v1/query/suggest", json={"query": "lev", "cursorPosition": 3})
        assert response.status_code == 200
        body = response.json()
        assert body["context"]["type"] == "filter-key-partial"
        assert body["group"]["type"] == "filter-values"
        assert body["group"]["filterKey"] == "level"

    def test_suggest_free_text(self, client):
        response = client.post("/v1/query/suggest", json={"query": "hello-world"})
        assert response.json()["group"] is None

    def test_preview(self, client):
        suggestion = {"id": "filter-value-level-error", "value": "error", "label": "Error", "category": "level"}
        response = client.post(
            "/v1/query/preview",
            json={"suggestion": suggestion, "query": "level:err", "cursorPosition": 9},
        )
        assert response.json() == {"preview": "level:error"}

    def test_validate(self, client):
        response = client.post("/v1/query/validate", json={"query": 'workflow:"abc'})
        assert response.json() == {"valid": False}


class TestCatalogAndDomains:
    def test_filters(self, client):
        response = client.get("/v1/filters")
        assert [f["key"] for f in response.json()] == ["level", "trigger", "cost", "date", "duration"]

    def test_update_domains(self, client):
        response = client.put("/v1/domains", json={"workflows": ["Daily report"]})
        assert response.status_code == 200
        assert response.json()["workflows"] == ["Daily report"]

        suggest = client.post("/v1/query/suggest", json={"query": "workflow:dai"})
        assert [s["value"] for s in suggest.json()["group"]["suggestions"]] == ['"Daily report"']

    def test_update_requires_admin_key(self, client, admin_key):
        response = client.put("/v1/domains", json={"folders": ["Ops"]})
        assert response.status_code == 401

        response = client.put(
            "/v1/domains", json={"folders": ["Ops"]}, headers={"X-API-Key": admin_key}
        )
        assert response.status_code == 200
        assert client.get("/v1/domains").json()["folders"] == ["Ops"]
