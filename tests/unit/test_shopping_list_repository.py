"""Shopping-list repository: one unauthorized retry, everything else terminal.

Invariants:
    - 401 invalidates the cached token and retries exactly once
    - A second 401 surfaces AuthenticationFailed; no third attempt
    - Non-401 errors and transport failures surface immediately as RequestError
"""

import httpx
import pytest

from adapters.cookidoo.shopping_list import CookidooShoppingListRepository
from core.domain.errors import AuthenticationFailed, RequestError
from core.domain.models import Credentials, ShoppingListItem
from core.services.token_cache import TokenCache
from core.services.token_manager import TokenManager

ITEMS_URL = "https://cookidoo.test/shopping/de-DE/additional-items/add"


@pytest.fixture
def manager(fake_auth, clock):
    creds = Credentials(email="a@b.c", password="pw", client_id="cid")
    return TokenManager(fake_auth, creds, cache=TokenCache(), clock=clock)


def _repository(api, manager):
    http = httpx.AsyncClient(transport=api.transport)
    return http, CookidooShoppingListRepository(http, ITEMS_URL, manager)


@pytest.mark.asyncio
async def test_posts_name_with_bearer_token(api, manager, fake_auth):
    http, repo = _repository(api, manager)
    async with http:
        await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert api.item_names() == ["Milch"]
    assert api.bearer_tokens() == ["Bearer access-1"]
    assert fake_auth.calls == ["login"]


@pytest.mark.asyncio
async def test_unauthorized_invalidates_and_retries_once(api, manager, fake_auth):
    api.item_responses = [(401, {"error": "revoked"}), (200, {})]
    http, repo = _repository(api, manager)
    async with http:
        await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert api.bearer_tokens() == ["Bearer access-1", "Bearer access-2"]
    assert fake_auth.calls == ["login", "login"]
    assert manager.cache.get().bearer == "access-2"


@pytest.mark.asyncio
async def test_second_unauthorized_raises_without_third_attempt(api, manager):
    api.item_responses = [(401, {}), (401, {}), (200, {})]
    http, repo = _repository(api, manager)
    async with http:
        with pytest.raises(AuthenticationFailed):
            await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert len(api.item_requests) == 2


@pytest.mark.asyncio
async def test_retry_with_other_error_raises_request_error(api, manager):
    api.item_responses = [(401, {}), (500, {})]
    http, repo = _repository(api, manager)
    async with http:
        with pytest.raises(RequestError) as excinfo:
            await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert excinfo.value.status == 500
    assert len(api.item_requests) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 403, 404, 500, 503])
async def test_non_auth_errors_are_terminal(api, manager, status):
    api.item_responses = [(status, {})]
    http, repo = _repository(api, manager)
    async with http:
        with pytest.raises(RequestError) as excinfo:
            await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert excinfo.value.status == status
    assert len(api.item_requests) == 1


@pytest.mark.asyncio
async def test_transport_failure_is_terminal(api, manager):
    api.raise_on_items = httpx.ReadTimeout("slow")
    http, repo = _repository(api, manager)
    async with http:
        with pytest.raises(RequestError) as excinfo:
            await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert excinfo.value.kind == "timeout"
    assert len(api.item_requests) == 1


@pytest.mark.asyncio
async def test_login_failure_during_retry_propagates(api, manager, fake_auth, auth_rejected):
    api.item_responses = [(401, {})]
    fake_auth.login_results = [fake_auth.token(), auth_rejected]
    http, repo = _repository(api, manager)
    async with http:
        with pytest.raises(AuthenticationFailed):
            await repo.add_item(ShoppingListItem.from_raw("Milch"))

    assert len(api.item_requests) == 1
    assert manager.cache.get() is None
