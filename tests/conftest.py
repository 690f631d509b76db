import json

import httpx
import pytest
import pytest_asyncio
from eth_account import Account

from indexy_mcp.api import IndexyClient
from indexy_mcp.auth import ApiKeyAuth, RequestSigner, WalletAuth
from indexy_mcp.auth.wallet import from_private_key


class FakeClock:
    """Millisecond clock that ticks forward on every read"""

    def __init__(self, start: int = 1_738_000_000_000, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


class RecordingHandler:
    """httpx.MockTransport handler that replays canned responses and keeps requests"""

    def __init__(self, status_code: int = 200, body: str = "{}"):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def private_key() -> str:
    return Account.create().key.hex()


@pytest.fixture
def wallet(private_key):
    return from_private_key(private_key)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def wallet_auth(wallet, clock):
    return WalletAuth(RequestSigner(wallet, "base", clock=clock))


@pytest.fixture
def api_key_auth():
    return ApiKeyAuth("test-api-key")


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest_asyncio.fixture
async def client(api_key_auth, handler):
    client = IndexyClient(
        "https://indexy.test",
        api_key_auth,
        transport=httpx.MockTransport(handler),
    )
    yield client
    await client.aclose()
