"""Tests for report payload building and best-effort webhook submission."""

import json
from datetime import datetime, timezone

import httpx

from engines.report import LOCAL_MESSAGE, build_report, submit_report
from engines.scoring import assess

ENDPOINT = "https://hooks.example.test/readiness"


def _state():
    return {
        "answers": {"ticket_volume": 3}, "company": "Acme", "email": "a@acme.test",
        "teamSize": 10, "hoursPerPersonWeek": 5, "hourlyRate": 60,
        "subscribe": True, "note": "hi",
    }


def _payload():
    state = _state()
    return build_report(state, assess(state), now=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))


class TestBuildReport:
    def test_fields(self):
        payload = _payload()
        assert set(payload) == {
            "org", "company", "email", "subscribe", "answers", "categoryScores", "overall",
            "initiatives", "roi", "note", "createdAt", "source",
        }
        assert payload["org"] == "Diversicom"
        assert payload["source"] == "ai-readiness-finder"
        assert payload["createdAt"] == "2026-01-02T03:04:05+00:00"

    def test_default_timestamp_is_iso(self):
        state = _state()
        payload = build_report(state, assess(state))
        assert datetime.fromisoformat(payload["createdAt"]).tzinfo is not None

    def test_answers_are_copied(self):
        state = _state()
        payload = build_report(state, assess(state))
        state["answers"]["kb_quality"] = 4
        assert payload["answers"] == {"ticket_volume": 3}


class TestSubmitReport:
    def test_no_endpoint_keeps_locally(self):
        calls = []
        client = httpx.Client(transport=httpx.MockTransport(lambda r: calls.append(r) or httpx.Response(200)))
        result = submit_report(_payload(), "", client=client)
        assert result == {"submitted": True, "delivered": False, "mode": "local", "message": LOCAL_MESSAGE}
        assert calls == []

    def test_posts_json_payload(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"ok": True})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        result = submit_report(_payload(), ENDPOINT, client=client)
        assert result["delivered"] is True
        assert result["mode"] == "webhook"
        assert seen["method"] == "POST"
        assert seen["url"] == ENDPOINT
        assert seen["body"]["company"] == "Acme"

    def test_http_error_is_swallowed(self, caplog):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
        result = submit_report(_payload(), ENDPOINT, client=client)
        assert result["submitted"] is True
        assert result["delivered"] is False
        assert "500" in caplog.text

    def test_connection_error_is_swallowed(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        result = submit_report(_payload(), ENDPOINT, client=client)
        assert result["submitted"] is True
        assert result["delivered"] is False

    def test_timeout_is_swallowed(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        assert submit_report(_payload(), ENDPOINT, client=client)["delivered"] is False

    def test_invalid_url_is_swallowed(self, caplog):
        calls = []
        client = httpx.Client(transport=httpx.MockTransport(lambda r: calls.append(r) or httpx.Response(200)))
        result = submit_report(_payload(), "http://hooks.example.test:notaport/", client=client)
        assert result["submitted"] is True
        assert result["delivered"] is False
        assert result["mode"] == "webhook"
        assert calls == []
        assert "invalid" in caplog.text
