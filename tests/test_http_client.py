"""Tests for the requests-backed HTTP client."""

from unittest import mock

import pytest
import requests

from supabase_ping.exceptions import ProbeTransportError
from supabase_ping.http_client import RequestsHttpClient
from supabase_ping.ping_manager import run


@mock.patch("supabase_ping.http_client.requests.Session")
def test_get_returns_status_and_elapsed(session_cls):
    session_cls.return_value.get.return_value = mock.Mock(status_code=404)
    client = RequestsHttpClient(timeout=5)

    response = client.get("https://a.test/rest/v1/", headers={"apikey": "k"})

    assert response.status_code == 404
    assert response.elapsed_ms >= 0
    session_cls.return_value.get.assert_called_once_with(
        "https://a.test/rest/v1/", headers={"apikey": "k"}, timeout=5
    )


@mock.patch("supabase_ping.http_client.requests.Session")
def test_default_timeout_is_left_to_requests(session_cls):
    session_cls.return_value.get.return_value = mock.Mock(status_code=200)

    RequestsHttpClient().get("https://a.test/rest/v1/", headers={})

    assert session_cls.return_value.get.call_args.kwargs["timeout"] is None


@mock.patch("supabase_ping.http_client.requests.Session")
def test_request_exception_becomes_transport_error(session_cls):
    session_cls.return_value.get.side_effect = requests.ConnectionError("Name or service not known")
    client = RequestsHttpClient()

    with pytest.raises(ProbeTransportError, match="Name or service not known") as excinfo:
        client.get("https://nowhere.test/rest/v1/", headers={})

    assert excinfo.value.status_code is None


@mock.patch("supabase_ping.http_client.requests.Session")
def test_close_closes_session(session_cls):
    with RequestsHttpClient():
        pass

    session_cls.return_value.close.assert_called_once()


@mock.patch("supabase_ping.http_client.requests.Session")
def test_header_encoding_error_becomes_transport_error(session_cls):
    session_cls.return_value.get.side_effect = UnicodeEncodeError(
        "latin-1", "ключ", 0, 4, "ordinal not in range(256)"
    )
    client = RequestsHttpClient()

    with pytest.raises(ProbeTransportError, match="latin-1"):
        client.get("https://a.test/rest/v1/", headers={"apikey": "ключ"})


@mock.patch("supabase_ping.http_client.requests.Session")
def test_run_continues_after_header_encoding_error(session_cls, capsys):
    session_cls.return_value.get.side_effect = [
        UnicodeEncodeError("latin-1", "ключ", 0, 4, "ordinal not in range(256)"),
        mock.Mock(status_code=200),
    ]
    raw = (
        '[{"name":"A","url":"https://a.test","key":"ключ"},'
        '{"name":"B","url":"https://b.test","key":"k"}]'
    )

    assert run(raw, client=RequestsHttpClient()) == 1

    out = capsys.readouterr().out
    assert "Pinging: B" in out
    assert "✅ Successful: 1" in out
    assert "❌ Failed: 1" in out
