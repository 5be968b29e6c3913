"""Tests for MemoryStorage."""

from objectgraph.models import Entity
from objectgraph.storage import MemoryStorage
from objectgraph.store import ObjectStore


class A(Entity):
    pass


class TestMemoryStoragePush:
    """Tests for push."""

    async def test_push_resolves_for_trivial_data(self) -> None:
        storage = MemoryStorage()
        await storage.push(ObjectStore(storage))
        assert storage.has_snapshot is True

    async def test_push_captures_plain_form(self) -> None:
        storage = MemoryStorage()
        store = ObjectStore(storage).register(A, "a")
        a = store.create(A)

        await storage.push(store)

        assert await storage.pull(store) == {"a": [{"id": a.id}]}

    async def test_snapshot_is_not_live(self) -> None:
        storage = MemoryStorage()
        store = ObjectStore(storage).register(A, "a")
        await storage.push(store)
        store.create(A)
        assert await storage.pull(store) == {"a": []}


class TestMemoryStoragePull:
    """Tests for pull."""

    async def test_pull_without_push_returns_empty_mapping(self) -> None:
        storage = MemoryStorage()
        assert await storage.pull(ObjectStore(storage)) == {}
        assert storage.has_snapshot is False

    async def test_pulled_data_cannot_corrupt_snapshot(self) -> None:
        storage = MemoryStorage()
        store = ObjectStore(storage).register(A, "a")
        store.create(A)
        await storage.push(store)

        pulled = await storage.pull(store)
        pulled["a"].clear()

        assert len((await storage.pull(store))["a"]) == 1


async def test_memory_storage_backs_object_store() -> None:
    storage = MemoryStorage()
    store = ObjectStore(storage).register(A, "a")
    a = store.create(A)

    await store.flush()
    store.delete(a)
    await store.reload()

    reloaded = store.fetch(A, a.id)
    assert reloaded is not None
    assert reloaded.id == a.id
