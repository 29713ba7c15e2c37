from __future__ import annotations

import base64
import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from gigya_sdk.client import GigyaClient
from gigya_sdk.errors import GigyaSDKError
from gigya_sdk.signing import create_signature

SECRET = base64.b64encode(b"shared-secret").decode()


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def json(self):
        return json.loads(self.text)


class RecordingRequestor:
    def __init__(self, response=None, error=None) -> None:
        self.calls = []
        self._response = response
        self._error = error

    def __call__(self, url, kwargs):
        self.calls.append((url, dict(kwargs)))
        if self._error is not None:
            raise self._error
        return self._response


def _client(requestor, **options):
    return GigyaClient(
        http_requestor=requestor,
        nonce_factory=lambda size: "n" * size,
        api_key="key123",
        secret=SECRET,
        **options,
    )


def test_request_returns_parsed_body():
    requestor = RecordingRequestor(FakeResponse('{"statusCode": 200, "UID": "123"}'))
    client = _client(requestor)

    result = client.request("getUserInfo", {"uid": "123"})

    assert result == {"statusCode": 200, "UID": "123"}
    url, kwargs = requestor.calls[0]
    parts = urlsplit(url)
    assert parts.scheme == "http"
    assert parts.netloc == "socialize.us1.gigya.com"
    assert parts.path == "/socialize.getUserInfo"
    query = parse_qs(parts.query)
    assert query["uid"] == ["123"]
    assert query["nonce"] == ["n" * 32]
    assert kwargs["method"] == "GET"
    assert kwargs["timeout"] == 60
    assert "data" not in kwargs


def test_post_request_sends_body():
    requestor = RecordingRequestor(FakeResponse('{"statusCode": 200}'))
    client = _client(requestor, req_method="POST", ssl=True)

    client.request("search", {"query": "select UID from accounts"}, service="accounts")

    url, kwargs = requestor.calls[0]
    assert url == "https://accounts.us1.gigya.com/accounts.search"
    body = parse_qs(kwargs["data"].decode())
    assert body["secret"] == [SECRET]
    assert body["query"] == ["select UID from accounts"]
    assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"


def test_api_error_carries_payload_verbatim():
    payload = {"statusCode": 403, "errorMessage": "x"}
    client = _client(RecordingRequestor(FakeResponse(json.dumps(payload))))

    with pytest.raises(GigyaSDKError) as exc_info:
        client.request("getUserInfo", {"uid": "123"})

    error = exc_info.value
    assert error.code == "API_ERROR"
    assert error.payload == payload
    assert error.error_message == "x"


def test_malformed_body_is_parse_error():
    client = _client(RecordingRequestor(FakeResponse("{not json")))

    with pytest.raises(GigyaSDKError) as exc_info:
        client.request("getUserInfo", {"uid": "123"})

    assert exc_info.value.code == "PARSE_ERROR"
    assert exc_info.value.payload is None
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_timeout_is_transport_error():
    timeout = requests.Timeout("read timed out")
    client = _client(RecordingRequestor(error=timeout), connection_timeout=1500)

    with pytest.raises(GigyaSDKError) as exc_info:
        client.request("getUserInfo", {"uid": "123"})

    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert "read timed out" in exc_info.value.message
    assert exc_info.value.__cause__ is timeout


def test_connection_timeout_is_passed_in_seconds():
    requestor = RecordingRequestor(FakeResponse('{"statusCode": 200}'))
    client = _client(requestor)

    client.request("getUserInfo", connection_timeout=2500)

    assert requestor.calls[0][1]["timeout"] == 2.5


def test_overrides_do_not_touch_client_config():
    requestor = RecordingRequestor(FakeResponse('{"statusCode": 200}'))
    client = _client(requestor)

    client.request("getUserInfo", {}, datacenter="eu1", ssl=True)
    client.request("getUserInfo", {})

    assert urlsplit(requestor.calls[0][0]).netloc == "socialize.eu1.gigya.com"
    assert urlsplit(requestor.calls[1][0]).netloc == "socialize.us1.gigya.com"
    assert client.config.datacenter == "us1"
    assert client.config.ssl is False


def test_callback_receives_result_once():
    client = _client(RecordingRequestor(FakeResponse('{"statusCode": 200, "ok": true}')))
    calls = []

    returned = client.request("getUserInfo", {}, callback=lambda err, res: calls.append((err, res)))

    assert returned is None
    assert calls == [(None, {"statusCode": 200, "ok": True})]


def test_callback_receives_error_once():
    client = _client(RecordingRequestor(FakeResponse('{"statusCode": 500, "errorCode": 500001}')))
    calls = []

    client.request("getUserInfo", {}, callback=lambda err, res: calls.append((err, res)))

    assert len(calls) == 1
    error, result = calls[0]
    assert result is None
    assert error.code == "API_ERROR"
    assert error.error_code == 500001


def test_request_async_resolves_future():
    client = _client(RecordingRequestor(FakeResponse('{"statusCode": 200, "UID": "1"}')))

    future = client.request_async("getUserInfo", {"uid": "1"})

    assert future.result(timeout=5) == {"statusCode": 200, "UID": "1"}


def test_request_async_rejects_future():
    client = _client(RecordingRequestor(error=requests.ConnectionError("refused")))

    future = client.request_async("getUserInfo", {"uid": "1"})

    with pytest.raises(GigyaSDKError) as exc_info:
        future.result(timeout=5)
    assert exc_info.value.code == "TRANSPORT_ERROR"


def test_validate_user_signature_uses_configured_secret():
    client = _client(RecordingRequestor())

    signature = create_signature("1700000000_uid-1", SECRET)

    assert client.validate_user_signature(signature, "1700000000", "uid-1")
    assert not client.validate_user_signature(signature, "1700000000", "uid-2")


def test_validate_user_signature_requires_secret():
    client = GigyaClient()

    with pytest.raises(GigyaSDKError):
        client.validate_user_signature("sig", "1", "uid")
