import json

import pytest
import requests

from executor_registration.config import ExecutorConfig
from executor_registration.eip712_helpers import TypedDataHasher

EXECUTOR = "0xabc0000000000000000000000000000000000001"
FEE_TOKEN = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
FEE_RECEIVER = "0x1111111111111111111111111111111111111111"
INPUT_TOKEN = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
HOP = "0x2222222222222222222222222222222222222222"
API_BASE_URL = "http://api.test"
TIMESTAMP = 1700000000000


def make_signature(v: int) -> str:
    return "0x" + "ab" * 32 + "cd" * 32 + format(v, "02x")


def make_response(status_code, body=None, url=API_BASE_URL):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        response._content = b""
    elif isinstance(body, str):
        response._content = body.encode()
    else:
        response._content = json.dumps(body).encode()
    return response


class StubHttp:
    """Records requests and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else make_response(200, {"data": {}})
        self.error = error
        self.calls = []

    def _reply(self):
        if self.error is not None:
            raise self.error
        return self.response

    def post(self, url, json):
        self.calls.append(("POST", url, json))
        return self._reply()

    def get(self, url):
        self.calls.append(("GET", url, None))
        return self._reply()


class FakeHasher(TypedDataHasher):
    """Returns a fixed digest and records what it was asked to hash."""

    def __init__(self, digest=b"\x11" * 32):
        self.digest = digest
        self.calls = []

    def hash(self, domain, types, message):
        self.calls.append((domain, types, message))
        return self.digest


@pytest.fixture
def env():
    return {
        "CHAIN_ID": "1",
        "EXECUTOR_ADDRESS": EXECUTOR,
        "INPUT_TOKENS": json.dumps([INPUT_TOKEN]),
        "HOP_ADDRESSES": json.dumps([HOP]),
        "FEE_IN_BPS": "25",
        "FEE_TOKEN": FEE_TOKEN,
        "FEE_RECEIVER": FEE_RECEIVER,
        "LIMIT_PER_EXECUTION": "true",
        "CLIENT_ID": "test",
        "ADDRESS_TAGS": json.dumps({HOP: "router"}),
        "EXECUTOR_NAME": "Test Executor",
        "EXECUTOR_LOGO": "https://example.com/logo.png",
        "API_BASE_URL": API_BASE_URL,
    }


@pytest.fixture
def config():
    return ExecutorConfig(
        timestamp=TIMESTAMP,
        chain_id=1,
        executor=EXECUTOR,
        input_tokens=[INPUT_TOKEN],
        hop_addresses=[HOP],
        fee_in_bps=25,
        fee_token=FEE_TOKEN,
        fee_receiver=FEE_RECEIVER,
        limit_per_execution=True,
        client_id="test",
        address_tags={HOP: "router"},
        executor_name="Test Executor",
        executor_logo="https://example.com/logo.png",
        api_base_url=API_BASE_URL,
    )


@pytest.fixture
def minimal_config():
    return ExecutorConfig(
        timestamp=TIMESTAMP,
        chain_id=1,
        executor=EXECUTOR,
        fee_token=FEE_TOKEN,
        fee_receiver=FEE_RECEIVER,
        limit_per_execution=False,
        client_id="test",
    )
