"""JSON file-backed room store.

Rooms are stored one per file as ``<rooms_dir>/<room_id>.json``. Files are
read on every lookup so the snapshot always reflects what is on disk.
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from roomtypes.models.room import RoomSnapshot
from roomtypes.stores.base import RoomStore


class JsonRoomStore(RoomStore):
    """Room store reading room documents from a directory."""

    def __init__(self, rooms_dir: Path):
        self.rooms_dir = Path(rooms_dir).expanduser()

    def _room_file(self, room_id: str) -> Optional[Path]:
        # Room ids come from callers; never let them escape the directory
        if not room_id or "/" in room_id or "\\" in room_id or room_id.startswith("."):
            return None
        return self.rooms_dir / f"{room_id}.json"

    def find_room(self, room_id: str, fields: Iterable[str]) -> Optional[RoomSnapshot]:
        room_file = self._room_file(room_id)
        if room_file is None or not room_file.exists():
            return None

        try:
            data = json.loads(room_file.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load room {room_id}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Room file {room_file} does not hold an object")
            return None

        data.setdefault("_id", room_id)
        return RoomSnapshot.from_dict(data, fields)

    def save_room(self, room: RoomSnapshot) -> None:
        """Write a room document to disk."""
        room_file = self._room_file(room.id)
        if room_file is None:
            raise ValueError(f"Invalid room id: {room.id!r}")
        self.rooms_dir.mkdir(parents=True, exist_ok=True)
        room_file.write_text(json.dumps(room.to_dict(), indent=2))
        logger.debug(f"Saved room: {room.id}")

    def list_room_ids(self) -> List[str]:
        """List ids of all rooms on disk."""
        if not self.rooms_dir.exists():
            return []
        return sorted(f.stem for f in self.rooms_dir.glob("*.json"))
