"""Tests for room snapshots and the reference stores."""

import json

import pytest

from roomtypes.models.room import RoomSnapshot
from roomtypes.stores.json_store import JsonRoomStore
from roomtypes.stores.memory import (
    InMemoryRoomStore,
    InMemorySubscriptionStore,
    RecordingRouter,
    StaticPermissionEngine,
)


class TestRoomSnapshot:
    """Test snapshot projection."""

    def test_from_dict_full(self):
        room = RoomSnapshot.from_dict(
            {"_id": "R", "t": "c", "ro": True, "muted": ["a"], "unmuted": ["b"], "name": "r"}
        )

        assert room.id == "R"
        assert room.t == "c"
        assert room.ro is True
        assert room.is_muted("a")
        assert room.is_unmuted("b")
        assert room.name == "r"

    def test_projection_leaves_other_fields_default(self):
        room = RoomSnapshot.from_dict({"_id": "R", "t": "c", "ro": True, "muted": ["a"]}, ["t"])

        assert room.t == "c"
        assert room.ro is False
        assert room.muted == frozenset()

    def test_non_list_mute_lists_are_empty(self):
        room = RoomSnapshot.from_dict({"id": "R", "muted": "alice", "unmuted": None})

        assert room.id == "R"
        assert not room.is_muted("alice")
        assert room.unmuted == frozenset()

    def test_to_dict(self):
        room = RoomSnapshot(id="R", t="c", muted=frozenset({"b", "a"}))
        data = room.to_dict()

        assert data["_id"] == "R"
        assert data["muted"] == ["a", "b"]


class TestInMemoryStores:
    """Test in-memory collaborators."""

    def test_room_store(self):
        store = InMemoryRoomStore([{"_id": "R", "t": "c", "archived": True}])

        assert store.find_room("R", ["archived"]).archived is True
        assert store.find_room("R", ["t"]).archived is False
        assert store.find_room("X", ["t"]) is None
        assert store.remove_room("R") is True
        assert len(store) == 0

    def test_room_store_requires_id(self):
        with pytest.raises(ValueError):
            InMemoryRoomStore([{"t": "c"}])

    def test_subscriptions(self):
        store = InMemorySubscriptionStore(["R", "R"])
        assert store.count_subscriptions("R") == 2

        store.unsubscribe("R")
        store.unsubscribe("R")
        store.unsubscribe("R")
        assert store.count_subscriptions("R") == 0

    def test_permissions(self):
        engine = StaticPermissionEngine(global_grants=["admin"], scoped_grants=[("post-readonly", "R")])

        assert engine.has_permission("admin", "anything") is True
        assert engine.has_permission("post-readonly", "R") is True
        assert engine.has_permission("post-readonly", "S") is False
        assert engine.has_permission("post-readonly") is False

        engine.revoke("post-readonly", "R")
        assert engine.has_permission("post-readonly", "R") is False

    def test_recording_router(self):
        router = RecordingRouter()
        assert router.last is None

        router.navigate("channel", {"name": "general"})
        assert router.last.route_name == "channel"
        assert router.last.query_params == {}
        assert len(router.history) == 1


class TestJsonRoomStore:
    """Test the JSON file-backed room store."""

    def test_find_room(self, tmp_path):
        (tmp_path / "R.json").write_text(json.dumps({"t": "c", "ro": True, "muted": ["a"]}))
        store = JsonRoomStore(tmp_path)

        room = store.find_room("R", ["t", "ro", "muted"])
        assert room.id == "R"
        assert room.ro is True
        assert room.is_muted("a")

    def test_missing_room(self, tmp_path):
        assert JsonRoomStore(tmp_path).find_room("R", ["t"]) is None
        assert JsonRoomStore(tmp_path / "nope").find_room("R", ["t"]) is None

    def test_invalid_json(self, tmp_path):
        (tmp_path / "R.json").write_text("{not json")
        assert JsonRoomStore(tmp_path).find_room("R", ["t"]) is None

    def test_non_object_json(self, tmp_path):
        (tmp_path / "R.json").write_text("[1, 2]")
        assert JsonRoomStore(tmp_path).find_room("R", ["t"]) is None

    @pytest.mark.parametrize("room_id", ["../R", "a/b", ".hidden", ""])
    def test_path_escape_rejected(self, tmp_path, room_id):
        assert JsonRoomStore(tmp_path).find_room(room_id, ["t"]) is None

    def test_save_and_list(self, tmp_path):
        store = JsonRoomStore(tmp_path / "rooms")
        store.save_room(RoomSnapshot(id="B", t="p"))
        store.save_room(RoomSnapshot(id="A", t="c", ro=True))

        assert store.list_room_ids() == ["A", "B"]
        assert store.find_room("A", ["t", "ro"]).ro is True

    def test_save_invalid_id(self, tmp_path):
        with pytest.raises(ValueError):
            JsonRoomStore(tmp_path).save_room(RoomSnapshot(id="../x"))
