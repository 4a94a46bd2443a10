import logging

from shortener.config import settings
from tests.constants import URLs


def _request_records(caplog):
    return [r for r in caplog.records if "Duration:" in r.getMessage()]


def test_request_is_logged(client, caplog):
    """Each request logs method, path, status and duration."""
    caplog.set_level(logging.INFO, logger="shortener")

    client.get(URLs.HEALTH)

    records = _request_records(caplog)
    assert len(records) == 1
    message = records[0].getMessage()
    assert message.startswith(f"GET {URLs.HEALTH} from ")
    assert "Status: 200" in message
    assert message.endswith("ms")


def test_error_status_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="shortener")

    client.get(URLs.REDIRECT.format("doesnotexist"), follow_redirects=False)

    records = _request_records(caplog)
    assert len(records) == 1
    assert "GET /doesnotexist" in records[0].getMessage()
    assert "Status: 404" in records[0].getMessage()


def test_long_url_not_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="shortener")

    client.post(URLs.LINKS, json={"url": "https://secret.example.com/token", "code": "abc"})

    assert all("secret.example.com" not in r.getMessage() for r in caplog.records)


def test_request_logging_disabled(client, caplog, monkeypatch):
    monkeypatch.setattr(settings, "REQUEST_LOGGING_ENABLED", False)
    caplog.set_level(logging.INFO, logger="shortener")

    response = client.get(URLs.HEALTH)

    assert response.status_code == 200
    assert _request_records(caplog) == []
