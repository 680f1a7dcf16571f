import logging
from typing import Dict, List, Optional

from baucua.models import PlayerId, Room, RoomId
from .errors import AlreadyExists, InvalidId

logger = logging.getLogger(__name__)


def clean_room_id(value) -> RoomId:
    """Normalise a client supplied room id (None/0/'' all become '')."""
    return RoomId(str(value or '').strip())


class RoomRegistry:
    """All live rooms of this process, keyed by room id.

    Built once by the application factory and handed to the session router.
    Rooms live in memory only and die with the process.
    """

    def __init__(self, max_players: int = 4, starting_coins: int = 100, chat_limit: int = 50):
        self.max_players = max_players
        self.starting_coins = starting_coins
        self.chat_limit = chat_limit
        self._rooms: Dict[RoomId, Room] = {}

    def __len__(self):
        return len(self._rooms)

    def __contains__(self, room_id):
        return clean_room_id(room_id) in self._rooms

    def create_room(self, room_id) -> Room:
        room_id = clean_room_id(room_id)
        if not room_id:
            raise InvalidId()
        if room_id in self._rooms:
            raise AlreadyExists(room_id)
        room = Room(
            room_id,
            max_players=self.max_players,
            starting_coins=self.starting_coins,
            chat_limit=self.chat_limit,
        )
        self._rooms[room_id] = room
        logger.info(f"[room-create] room={room_id} live_rooms={len(self._rooms)}")
        return room

    def get_room(self, room_id) -> Optional[Room]:
        return self._rooms.get(clean_room_id(room_id))

    def remove_room(self, room_id) -> None:
        room_id = clean_room_id(room_id)
        if self._rooms.pop(room_id, None) is not None:
            logger.info(f"[room-remove] room={room_id} live_rooms={len(self._rooms)}")

    def rooms_with_player(self, player_id: PlayerId) -> List[Room]:
        # A list, not a generator: callers remove rooms while walking it
        return [room for room in self._rooms.values() if player_id in room.players]
