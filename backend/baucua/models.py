import enum
import time
from typing import Dict, List, NewType, Optional

from baucua.services.rooms.errors import (
    EmptyMessage,
    InsufficientFunds,
    InvalidBet,
    NotHost,
    NothingStaked,
    RoomFull,
    UnknownPlayer,
)
from baucua.services.rooms.payout import SYMBOLS, Settlement, settle

PlayerId = NewType('PlayerId', str)
RoomId = NewType('RoomId', str)

DEFAULT_PLAYER_NAME = 'Player'
SYSTEM_NAME = 'System'


class RoomStatus(str, enum.Enum):
    BETTING = 'betting'


def coerce_amount(value) -> int:
    """Turn a client supplied amount into a non-negative int (junk -> 0)."""
    if isinstance(value, bool):
        return 0
    try:
        amount = int(float(value or 0))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, amount)


class Player:
    def __init__(self, id: PlayerId, name: str, coins: int):
        self.id = id
        self.name = name
        self.coins = coins

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'coins': self.coins,
        }


class ChatEntry:
    def __init__(self, name: str, message: str, timestamp: Optional[int] = None):
        self.name = name
        self.message = message
        self.timestamp = timestamp if timestamp is not None else int(time.time() * 1000)

    def to_dict(self):
        return {
            'name': self.name,
            'message': self.message,
            'timestamp': self.timestamp,
        }


class Room:
    """One betting table.

    Invariants kept by the mutation methods below:
    - host_id is None or a key of players
    - every key of bets is a key of players
    - len(chat) <= chat_limit
    """

    def __init__(self, room_id: RoomId, max_players: int = 4, starting_coins: int = 100,
                 chat_limit: int = 50):
        self.room_id = room_id
        self.max_players = max_players
        self.starting_coins = starting_coins
        self.chat_limit = chat_limit
        self.host_id: Optional[PlayerId] = None
        self.players: Dict[PlayerId, Player] = {}
        self.bets: Dict[PlayerId, Dict[str, int]] = {}
        self.last_draw: List[str] = []
        self.last_settlements: Dict[PlayerId, Settlement] = {}
        self.chat: List[ChatEntry] = []
        self.status = RoomStatus.BETTING

    def __repr__(self):
        return f'<Room {self.room_id} players={len(self.players)} host={self.host_id}>'

    @property
    def is_empty(self) -> bool:
        return not self.players

    def _player(self, player_id) -> Player:
        player = self.players.get(player_id)
        if player is None:
            raise UnknownPlayer(player_id)
        return player

    # ---- membership ----

    def add_player(self, player_id: PlayerId, name=None) -> Player:
        existing = self.players.get(player_id)
        if existing is not None:
            return existing
        if len(self.players) >= self.max_players:
            raise RoomFull(self.max_players)
        name = str(name or '').strip() or DEFAULT_PLAYER_NAME
        player = Player(player_id, name, self.starting_coins)
        self.players[player_id] = player
        if self.host_id is None:
            self.host_id = player_id
        return player

    def remove_player(self, player_id: PlayerId) -> bool:
        """Drop a player and their stakes. Returns True if the room is now empty."""
        self.players.pop(player_id, None)
        self.bets.pop(player_id, None)
        if self.host_id == player_id:
            # dicts keep insertion order, so this is the earliest joiner still here
            self.host_id = next(iter(self.players), None)
        return self.is_empty

    # ---- betting ----

    def _validate_bet(self, player_id, symbol, amount):
        player = self._player(player_id)
        symbol = str(symbol or '')
        if symbol not in SYMBOLS:
            raise InvalidBet(f'Unknown symbol {symbol!r}')
        amount = coerce_amount(amount)
        if amount <= 0:
            raise InvalidBet('Bet amount must be positive')
        return player, symbol, amount

    def place_bet(self, player_id: PlayerId, symbol, amount) -> int:
        """Move coins from the player onto a symbol. Returns the new stake."""
        player, symbol, amount = self._validate_bet(player_id, symbol, amount)
        if player.coins < amount:
            raise InsufficientFunds(player.coins, amount)
        stakes = self.bets.setdefault(player_id, {})
        player.coins -= amount
        stakes[symbol] = stakes.get(symbol, 0) + amount
        return stakes[symbol]

    def remove_bet(self, player_id: PlayerId, symbol, amount) -> int:
        """Refund up to ``amount`` from a stake. Returns the amount refunded.

        Asking for more than is staked refunds the whole stake.
        """
        player, symbol, amount = self._validate_bet(player_id, symbol, amount)
        stakes = self.bets.get(player_id, {})
        current = stakes.get(symbol, 0)
        if current <= 0:
            raise NothingStaked(f'Nothing staked on {symbol}')
        take = min(amount, current)
        stakes[symbol] = current - take
        player.coins += take
        return take

    def draw(self, player_id: PlayerId, rng) -> List[str]:
        """Roll three symbols (with replacement) and pay out every player."""
        if player_id is None or player_id != self.host_id:
            raise NotHost()
        result = [rng.choice(SYMBOLS) for _ in range(3)]

        settlements = {}
        for pid, player in self.players.items():
            settlement = settle(result, self.bets.get(pid, {}))
            # stakes already left the player's balance when the bet was placed
            player.coins += settlement.payout
            settlements[pid] = settlement

        self.bets = {}
        self.last_draw = result
        self.last_settlements = settlements
        return result

    # ---- chat ----

    def _append_chat(self, entry: ChatEntry) -> ChatEntry:
        self.chat.append(entry)
        if len(self.chat) > self.chat_limit:
            del self.chat[:len(self.chat) - self.chat_limit]
        return entry

    def post_chat(self, player_id: PlayerId, message) -> ChatEntry:
        player = self._player(player_id)
        text = str(message or '').strip()
        if not text:
            raise EmptyMessage()
        return self._append_chat(ChatEntry(player.name, text))

    def post_system(self, message: str) -> ChatEntry:
        return self._append_chat(ChatEntry(SYSTEM_NAME, message))
