import base64
import json

import pytest

from gigya_sdk import Gigya
from gigya_sdk.services import ALL_SERVICES, Accounts, Socialize


class RecordingClient:
    def __init__(self):
        self.calls = []

    def request(self, method, params=None, callback=None, **overrides):
        self.calls.append((method, params, callback, overrides))
        return {"statusCode": 200}

    def request_async(self, method, params=None, **overrides):
        self.calls.append((method, params, None, overrides))
        return "future"


class FakeResponse:
    def __init__(self, text):
        self.text = text

    def json(self):
        return json.loads(self.text)


def test_service_method_forwards_to_client():
    client = RecordingClient()
    socialize = Socialize(client)

    result = socialize.get_user_info({"uid": "123"})

    assert result == {"statusCode": 200}
    assert client.calls == [("getUserInfo", {"uid": "123"}, None, {"service": "socialize"})]


def test_service_method_passes_callback_and_overrides():
    client = RecordingClient()
    accounts = Accounts(client)
    callback = lambda err, res: None  # noqa: E731

    accounts.search({"query": "select *"}, callback, req_method="POST")

    method, params, passed_callback, overrides = client.calls[0]
    assert method == "search"
    assert passed_callback is callback
    assert overrides == {"req_method": "POST", "service": "accounts"}


def test_service_cannot_be_redirected_by_overrides():
    client = RecordingClient()

    Socialize(client).login({}, service="accounts")

    assert client.calls[0][3]["service"] == "socialize"


def test_call_async_forwards_service():
    client = RecordingClient()

    assert Socialize(client).call_async("getUserInfo", {"uid": "1"}) == "future"
    assert client.calls[0][3] == {"service": "socialize"}


@pytest.mark.parametrize("service_cls", ALL_SERVICES)
def test_every_service_method_targets_its_own_service(service_cls):
    client = RecordingClient()
    service = service_cls(client)

    names = [name for name, value in vars(service_cls).items() if callable(value)]
    assert names
    for name in names:
        getattr(service, name)()

    assert {overrides["service"] for *_, overrides in client.calls} == {service_cls.service}


def test_gigya_wires_services_to_one_client():
    seen = []

    def requestor(url, kwargs):
        seen.append(url)
        return FakeResponse('{"statusCode": 200, "UID": "1"}')

    gigya = Gigya(
        api_key="key",
        secret=base64.b64encode(b"secret").decode(),
        datacenter="eu1",
        http_requestor=requestor,
    )

    assert gigya.accounts.get_account_info({"UID": "1"}) == {"statusCode": 200, "UID": "1"}
    assert seen[0].startswith("http://accounts.eu1.gigya.com/accounts.getAccountInfo?")
    assert gigya.socialize.client is gigya.accounts.client
    assert gigya.config.datacenter == "eu1"
