"""Per-recipient room views and the notifications that carry them.

Everyone in a room sees the same players, chat and last draw, but only their
own stakes, so the state broadcast is one message per member rather than a
single room-wide emit.
"""
from typing import Any, List, NamedTuple, Sequence

from baucua.models import ChatEntry, PlayerId, Room
from .payout import SYMBOLS


class Notification(NamedTuple):
    event: str
    payload: Any
    to: PlayerId


def room_view(room: Room, recipient_id: PlayerId) -> dict:
    return {
        'roomId': room.room_id,
        'hostId': room.host_id,
        'status': room.status.value,
        'lastDraw': list(room.last_draw),
        'symbols': list(SYMBOLS),
        'players': [p.to_dict() for p in room.players.values()],
        'myBets': dict(room.bets.get(recipient_id, {})),
        'chat': [entry.to_dict() for entry in room.chat],
    }


def state_notifications(room: Room) -> List[Notification]:
    return [Notification('room_state', room_view(room, pid), pid) for pid in room.players]


def draw_notifications(room: Room, draw: Sequence[str]) -> List[Notification]:
    return [Notification('roll_result', {'draw': list(draw)}, pid) for pid in room.players]


def chat_notifications(room: Room, entry: ChatEntry) -> List[Notification]:
    return [Notification('chat_message', entry.to_dict(), pid) for pid in room.players]


def error_notification(recipient_id: PlayerId, message: str) -> Notification:
    return Notification('error_msg', message, recipient_id)
