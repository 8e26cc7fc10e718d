"""AuthorizationService: resolution pipeline with cache and store fakes."""

from unittest.mock import AsyncMock

import pytest

from rebac.application.services.authorization_service import AuthorizationService
from rebac.domain.enums import SqlDialect
from rebac.domain.exceptions import AuthorizationException, ValidationException
from rebac.domain.value_objects.core import CacheLookup
from tests.fakes import FakeDecisionStore


@pytest.fixture
def service(decision_store, decision_cache) -> AuthorizationService:
    return AuthorizationService(decision_store=decision_store, decision_cache=decision_cache)


async def test_miss_queries_store_then_hit_skips_it(service, decision_store, kv_store) -> None:
    """user:1 owner doc:42: first call misses and queries, second is served from cache."""
    assert await service.check("user:1", "owner", "doc:42") is True
    assert decision_store.has_tuple_calls == ["user:1#owner@doc:42"]
    assert "ruleCache:user:1#owner@doc:42" in kv_store.data

    assert await service.check("user:1", "owner", "doc:42") is True
    assert decision_store.has_tuple_calls == ["user:1#owner@doc:42"]


async def test_negative_decision_is_cached(service, decision_store) -> None:
    assert await service.check("user:2", "owner", "doc:42") is False
    assert await service.check("user:2", "owner", "doc:42") is False
    assert decision_store.has_tuple_calls == ["user:2#owner@doc:42"]


async def test_expired_entry_requeries(service, decision_store, clock) -> None:
    await service.check("user:1", "owner", "doc:42")
    clock.advance(2000)
    await service.check("user:1", "owner", "doc:42")
    assert len(decision_store.has_tuple_calls) == 2


async def test_invalid_triple_touches_neither_cache_nor_store(decision_store) -> None:
    cache = AsyncMock()
    svc = AuthorizationService(decision_store=decision_store, decision_cache=cache)
    with pytest.raises(ValidationException):
        await svc.check("user:1", "owner", "user:1")
    cache.lookup.assert_not_called()
    cache.store.assert_not_called()
    assert decision_store.has_tuple_calls == []


async def test_without_cache_always_queries(decision_store) -> None:
    svc = AuthorizationService(decision_store=decision_store)
    await svc.check("user:1", "owner", "doc:42")
    await svc.check("user:1", "owner", "doc:42")
    assert len(decision_store.has_tuple_calls) == 2


async def test_cached_hit_returned_as_is(decision_store) -> None:
    cache = AsyncMock()
    cache.lookup.return_value = CacheLookup.hit(False)
    svc = AuthorizationService(decision_store=decision_store, decision_cache=cache)
    assert await svc.check("user:1", "owner", "doc:42") is False
    assert decision_store.has_tuple_calls == []
    cache.store.assert_not_called()


async def test_store_error_propagates(decision_cache) -> None:
    store = AsyncMock()
    store.has_tuple.side_effect = ConnectionError("store down")
    svc = AuthorizationService(decision_store=store, decision_cache=decision_cache)
    with pytest.raises(ConnectionError):
        await svc.check("user:1", "owner", "doc:42")


async def test_require_raises_when_denied(service) -> None:
    await service.require("user:1", "owner", "doc:42")
    with pytest.raises(AuthorizationException) as exc_info:
        await service.require("user:9", "owner", "doc:42")
    assert exc_info.value.details["subject"] == "user:9"


async def test_get_access_list_builds_prefix_query() -> None:
    rows = [{"_id": "42", "title": "Spec"}]
    store = FakeDecisionStore(rows=rows, dialect=SqlDialect.SQL)
    svc = AuthorizationService(decision_store=store)

    result = await svc.get_access_list("user:1", "read", "doc", "documents")

    assert result == rows
    (query,) = store.queries
    assert "LIKE 'user:1#read@doc:%'" in query
    assert "FROM documents AS s" in query


async def test_get_access_list_dialect_override() -> None:
    store = FakeDecisionStore(dialect=SqlDialect.SQL)
    svc = AuthorizationService(decision_store=store)
    await svc.get_access_list("user:1", "read", "doc", "documents", dialect=SqlDialect.POSTGRES)
    assert 'FROM "documents" AS s' in store.queries[0]


async def test_get_access_list_rejects_unsafe_input() -> None:
    store = FakeDecisionStore()
    svc = AuthorizationService(decision_store=store)
    with pytest.raises(ValidationException):
        await svc.get_access_list("user:1'--", "read", "doc", "documents")
    assert store.queries == []
