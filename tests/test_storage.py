"""Tests for session snapshot stores."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from accesscore import AccessConfig, InMemorySnapshotStore, RedisSnapshotStore, SnapshotStore


def _fake_redis_module(client: MagicMock) -> MagicMock:
    module = MagicMock()
    module.from_url.return_value = client
    return module


class TestInMemorySnapshotStore:
    """Tests for InMemorySnapshotStore."""

    def test_round_trip(self) -> None:
        store = InMemorySnapshotStore()
        assert store.load() is None
        store.save('{"role": "STAFF"}')
        assert store.load() == '{"role": "STAFF"}'
        store.clear()
        assert store.load() is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemorySnapshotStore(), SnapshotStore)
        assert isinstance(RedisSnapshotStore("s"), SnapshotStore)


class TestRedisSnapshotStore:
    """Tests for RedisSnapshotStore."""

    def test_key_uses_prefix(self) -> None:
        assert RedisSnapshotStore("sess-1").key == "accesscore:session:sess-1"
        assert RedisSnapshotStore("sess-1", prefix="app:auth").key == "app:auth:sess-1"

    def test_from_config(self) -> None:
        config = AccessConfig(
            redis_url="redis://localhost:6379/0",
            snapshot_key_prefix="custom",
            snapshot_ttl_seconds=60,
        )
        store = RedisSnapshotStore.from_config("sess-1", config)
        assert store.redis_url == "redis://localhost:6379/0"
        assert store.key == "custom:sess-1"
        assert store.ttl_seconds == 60

    def test_no_redis_url_is_noop(self) -> None:
        client = MagicMock()
        with patch.dict("sys.modules", {"redis": _fake_redis_module(client)}):
            store = RedisSnapshotStore("sess-1")
            store.save("{}")
            assert store.load() is None
            store.clear()
        client.set.assert_not_called()

    def test_redis_not_installed_is_noop(self) -> None:
        with patch.dict("sys.modules", {"redis": None}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0")
            store.save("{}")
            assert store.load() is None
            store.clear()

    def test_save_without_ttl(self) -> None:
        client = MagicMock()
        with patch.dict("sys.modules", {"redis": _fake_redis_module(client)}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0")
            store.save('{"a": 1}')
        client.set.assert_called_once_with("accesscore:session:sess-1", '{"a": 1}')
        client.setex.assert_not_called()

    def test_save_with_ttl(self) -> None:
        client = MagicMock()
        with patch.dict("sys.modules", {"redis": _fake_redis_module(client)}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0", ttl_seconds=120)
            store.save("{}")
        client.setex.assert_called_once_with("accesscore:session:sess-1", 120, "{}")

    def test_load_and_clear(self) -> None:
        client = MagicMock()
        client.get.return_value = '{"role": "GUEST"}'
        module = _fake_redis_module(client)
        with patch.dict("sys.modules", {"redis": module}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0")
            assert store.load() == '{"role": "GUEST"}'
            store.clear()
        client.get.assert_called_once_with("accesscore:session:sess-1")
        client.delete.assert_called_once_with("accesscore:session:sess-1")
        module.from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=True)

    def test_connection_errors_are_logged_not_raised(self) -> None:
        client = MagicMock()
        client.get.side_effect = ConnectionError("down")
        client.set.side_effect = ConnectionError("down")
        with patch.dict("sys.modules", {"redis": _fake_redis_module(client)}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0")
            assert store.load() is None
            store.save("{}")

    def test_close_releases_client(self) -> None:
        client = MagicMock()
        with patch.dict("sys.modules", {"redis": _fake_redis_module(client)}):
            store = RedisSnapshotStore("sess-1", redis_url="redis://localhost:6379/0")
            store.load()
            store.close()
        client.close.assert_called_once()
