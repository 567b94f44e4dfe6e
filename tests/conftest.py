"""Root conftest: shared fakes for the token lifecycle and the Cookidoo API.

Invariants:
    - No test reaches the network: HTTP goes through httpx.MockTransport
    - Settings never read a developer's .env (_env_file=None)
    - Secrets used in tests are distinctive strings so leaks are greppable

Design Decisions:
    - Fakes are exposed as fixtures (tests run with --import-mode=importlib)
    - FakeClock drives expiry instead of sleeping
"""

import asyncio
import json
from urllib.parse import parse_qs

import httpx
import pytest

from core.config import AppSettings
from core.domain.errors import AuthenticationFailed
from core.domain.models import AuthToken

EMAIL = "koch@example.com"
PASSWORD = "s3cret-Passw0rd"
CLIENT_ID = "client-xyz"
BASE_URL = "https://cookidoo.test"


class FakeClock:
    def __init__(self, now: float = 10_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeAuthService:
    """AuthenticationService double with scripted results and call log.

    Each entry of `login_results` / `refresh_results` is either a token or an
    exception to raise. When `gate` is set, every call waits on it first.
    """

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.calls: list[str] = []
        self.login_results: list = []
        self.refresh_results: list = []
        self.gate: asyncio.Event | None = None
        self._issued = 0

    def token(self, *, expires_in: float = 3600, refresh: bool = True) -> AuthToken:
        self._issued += 1
        return AuthToken.issued(
            access_token=f"access-{self._issued}",
            refresh_token=f"refresh-{self._issued}" if refresh else None,
            expires_in=expires_in,
            now=self.clock(),
        )

    async def _next(self, results: list):
        if self.gate is not None:
            await self.gate.wait()
        result = results.pop(0) if results else self.token()
        if isinstance(result, Exception):
            raise result
        return result

    async def authenticate(self, credentials):
        self.calls.append("login")
        return await self._next(self.login_results)

    async def refresh(self, refresh_token: str):
        self.calls.append("refresh")
        return await self._next(self.refresh_results)


class FakeCookidooApi:
    """MockTransport-backed token + shopping-list endpoints.

    `token_responses` and `item_responses` are queues of (status, json body);
    when empty, token calls succeed with a fresh token and item calls return 200.
    """

    def __init__(self) -> None:
        self.token_responses: list[tuple[int, dict]] = []
        self.item_responses: list[tuple[int, dict]] = []
        self.token_requests: list[dict[str, str]] = []
        self.item_requests: list[httpx.Request] = []
        self.raise_on_items: Exception | None = None
        self._issued = 0
        self.transport = httpx.MockTransport(self._handle)

    @property
    def grants(self) -> list[str]:
        return [form["grant_type"] for form in self.token_requests]

    def item_names(self) -> list[str]:
        return [json.loads(req.content)["name"] for req in self.item_requests]

    def bearer_tokens(self) -> list[str]:
        return [req.headers["Authorization"] for req in self.item_requests]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/ciam/auth/token"):
            form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            self.token_requests.append(form)
            if self.token_responses:
                status, body = self.token_responses.pop(0)
                return httpx.Response(status, json=body)
            self._issued += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"srv-access-{self._issued}",
                    "refresh_token": f"srv-refresh-{self._issued}",
                    "expires_in": 43200,
                    "token_type": "Bearer",
                },
            )
        if request.url.path.endswith("/additional-items/add"):
            self.item_requests.append(request)
            if self.raise_on_items is not None:
                raise self.raise_on_items
            if self.item_responses:
                status, body = self.item_responses.pop(0)
                return httpx.Response(status, json=body)
            return httpx.Response(200, json={"ok": True})
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_auth(clock):
    return FakeAuthService(clock)


@pytest.fixture
def api():
    return FakeCookidooApi()


@pytest.fixture
def settings():
    return AppSettings(
        _env_file=None,
        email=EMAIL,
        password=PASSWORD,
        client_id=CLIENT_ID,
        base_url=BASE_URL,
    )


@pytest.fixture
def secrets():
    """Strings that must never appear in responses or logs."""
    return [EMAIL, PASSWORD, CLIENT_ID]


@pytest.fixture
def auth_rejected():
    return AuthenticationFailed("rejected")
