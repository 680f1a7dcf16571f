import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from baucua.models import PlayerId, Room, RoomId
from .errors import GameError, InvalidId, NotFound, SilentReject
from .registry import RoomRegistry, clean_room_id
from .views import (
    Notification,
    chat_notifications,
    draw_notifications,
    error_notification,
    state_notifications,
)

logger = logging.getLogger(__name__)

Dispatch = Tuple[Optional[RoomId], List[Notification]]


class SessionRouter:
    """Turns inbound client events into room mutations and outbound notifications.

    ``handle`` runs one event to completion and returns the notifications to
    deliver, in order. It never talks to the transport, so it can be driven
    directly from tests. Callers must not run two ``handle``/``disconnect``
    calls for the same registry at the same time.
    """

    def __init__(self, registry: RoomRegistry, rng=None):
        self.registry = registry
        self.rng = rng or random.Random()
        self._handlers: Dict[str, Callable[[dict, RoomId, PlayerId], List[Notification]]] = {
            'create_room': self._create_room,
            'join_room': self._join_room,
            'place_bet': self._place_bet,
            'remove_bet': self._remove_bet,
            'roll': self._draw,
            'draw': self._draw,
            'chat_message': self._chat_message,
        }

    @property
    def events(self):
        return list(self._handlers)

    def handle(self, event: str, payload, sender_id: PlayerId) -> Dispatch:
        handler = self._handlers.get(event)
        if handler is None:
            logger.warning(f"[unknown-event] event={event} sid={sender_id}")
            return None, []
        payload = payload if isinstance(payload, dict) else {}
        room_id = clean_room_id(payload.get('roomId'))
        try:
            if not room_id:
                raise InvalidId()
            return room_id, handler(payload, room_id, sender_id)
        except SilentReject as exc:
            logger.debug(f"[reject] event={event} room={room_id} sid={sender_id} reason={exc.message}")
            return room_id or None, []
        except GameError as exc:
            logger.info(f"[error] event={event} room={room_id} sid={sender_id} reason={exc.message}")
            return room_id or None, [error_notification(sender_id, exc.message)]

    def disconnect(self, sender_id: PlayerId) -> List[Notification]:
        """Remove a connection from every room it sits in."""
        notifications: List[Notification] = []
        for room in self.registry.rooms_with_player(sender_id):
            player = room.players[sender_id]
            was_host = room.host_id == sender_id
            if room.remove_player(sender_id):
                self.registry.remove_room(room.room_id)
                continue

            text = f"{player.name} left the room."
            if was_host and room.host_id is not None:
                text += f" {room.players[room.host_id].name} is now the host."
            logger.info(f"[leave] room={room.room_id} sid={sender_id} host={room.host_id}")
            entry = room.post_system(text)
            notifications += chat_notifications(room, entry)
            notifications += state_notifications(room)
        return notifications

    # ---- event handlers ----

    def _room(self, room_id: RoomId) -> Room:
        room = self.registry.get_room(room_id)
        if room is None:
            raise NotFound(room_id)
        return room

    def _create_room(self, payload, room_id, sender_id):
        room = self.registry.create_room(room_id)
        room.add_player(sender_id, payload.get('name'))
        logger.info(f"[join] room={room_id} sid={sender_id} host=True")
        return state_notifications(room)

    def _join_room(self, payload, room_id, sender_id):
        room = self._room(room_id)
        room.add_player(sender_id, payload.get('name'))
        logger.info(f"[join] room={room_id} sid={sender_id} players={len(room.players)}")
        return state_notifications(room)

    def _place_bet(self, payload, room_id, sender_id):
        room = self._room(room_id)
        room.place_bet(sender_id, payload.get('symbol'), payload.get('amount'))
        return state_notifications(room)

    def _remove_bet(self, payload, room_id, sender_id):
        room = self._room(room_id)
        room.remove_bet(sender_id, payload.get('symbol'), payload.get('amount'))
        return state_notifications(room)

    def _draw(self, payload, room_id, sender_id):
        room = self._room(room_id)
        draw = room.draw(sender_id, self.rng)
        logger.info(f"[draw] room={room_id} draw={','.join(draw)}")
        for pid, settlement in room.last_settlements.items():
            if settlement.total_staked:
                logger.debug(f"[settle] room={room_id} sid={pid} {settlement.to_dict()}")
        return draw_notifications(room, draw) + state_notifications(room)

    def _chat_message(self, payload, room_id, sender_id):
        room = self._room(room_id)
        entry = room.post_chat(sender_id, payload.get('message'))
        return chat_notifications(room, entry) + state_notifications(room)
