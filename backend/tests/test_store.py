"""Tests for the in-memory session store: lazy creation, TTL and capacity eviction."""

from datetime import datetime, timedelta, timezone

import pytest

from models import SecretWord, SessionStatus
from services.errors import ServiceError
from services.store import SessionStore
from tests.fakes import FakeWordSource

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_get_or_create_fetches_word_once_per_session() -> None:
    store = SessionStore()
    source = FakeWordSource([SecretWord(name="chien", category="animaux")])

    first = await store.get_or_create("sid-1", source)
    second = await store.get_or_create("sid-1", source)

    assert first is second
    assert source.calls == 1
    assert first.status is SessionStatus.ACTIVE
    assert first.secret == SecretWord(name="chien", category="animaux")
    assert "sid-1" in store
    assert len(store) == 1


@pytest.mark.asyncio
async def test_each_session_gets_its_own_secret() -> None:
    store = SessionStore()
    source = FakeWordSource(
        [SecretWord(name="chien", category="animaux"), SecretWord(name="pomme", category="fruits")]
    )
    a = await store.get_or_create("a", source)
    b = await store.get_or_create("b", source)
    assert a.secret.name == "chien"
    assert b.secret.name == "pomme"


@pytest.mark.asyncio
async def test_word_source_failure_stores_nothing() -> None:
    store = SessionStore()
    source = FakeWordSource(error=ServiceError("Word source is unreachable"))
    with pytest.raises(ServiceError):
        await store.get_or_create("sid-1", source)
    assert "sid-1" not in store


def test_get_unknown_session_returns_none() -> None:
    assert SessionStore().get("missing") is None


@pytest.mark.asyncio
async def test_idle_sessions_expire() -> None:
    store = SessionStore(ttl_seconds=60)
    source = FakeWordSource()
    await store.get_or_create("old", source, now=T0)
    await store.get_or_create("fresh", source, now=T0 + timedelta(seconds=50))

    evicted = store.evict_expired(now=T0 + timedelta(seconds=90))

    assert evicted == 1
    assert "old" not in store
    assert "fresh" in store


@pytest.mark.asyncio
async def test_get_refreshes_last_seen() -> None:
    store = SessionStore(ttl_seconds=60)
    await store.get_or_create("sid", FakeWordSource(), now=T0)
    assert store.get("sid", now=T0 + timedelta(seconds=45)) is not None
    assert store.get("sid", now=T0 + timedelta(seconds=100)) is not None
    assert store.get("sid", now=T0 + timedelta(seconds=200)) is None


@pytest.mark.asyncio
async def test_capacity_drops_least_recently_seen() -> None:
    store = SessionStore(max_sessions=2)
    source = FakeWordSource()
    await store.get_or_create("a", source, now=T0)
    await store.get_or_create("b", source, now=T0)
    store.get("a", now=T0)
    await store.get_or_create("c", source, now=T0)

    assert "a" in store
    assert "b" not in store
    assert "c" in store


def test_max_sessions_must_be_positive() -> None:
    with pytest.raises(ValueError):
        SessionStore(max_sessions=0)


@pytest.mark.asyncio
async def test_clear_empties_store() -> None:
    store = SessionStore()
    await store.get_or_create("sid", FakeWordSource())
    store.clear()
    assert len(store) == 0


@pytest.mark.asyncio
async def test_eviction_scan_stops_at_first_live_session() -> None:
    store = SessionStore(ttl_seconds=60)
    source = FakeWordSource()
    await store.get_or_create("a", source, now=T0)
    await store.get_or_create("b", source, now=T0 + timedelta(seconds=50))
    late = await store.get_or_create("c", source, now=T0 + timedelta(seconds=60))
    # Entries behind a live one are not inspected, even if their timestamp is stale.
    late.last_seen_at = T0

    evicted = store.evict_expired(now=T0 + timedelta(seconds=90))

    assert evicted == 1
    assert list(store) == ["b", "c"]


@pytest.mark.asyncio
async def test_touched_session_moves_behind_idle_ones() -> None:
    store = SessionStore(ttl_seconds=60)
    source = FakeWordSource()
    for i, sid in enumerate(["a", "b", "c"]):
        await store.get_or_create(sid, source, now=T0 + timedelta(seconds=i))
    store.get("a", now=T0 + timedelta(seconds=40))

    assert list(store) == ["b", "c", "a"]
    assert store.evict_expired(now=T0 + timedelta(seconds=70)) == 2
    assert list(store) == ["a"]
