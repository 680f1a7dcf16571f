"""Room errors.

Every rule a request can break raises a subclass of GameError. The session
router catches them at its dispatch boundary: reported errors are sent back
to the requesting connection as ``error_msg``, SilentReject errors are
logged and dropped.
"""


class GameError(Exception):
    """Base class for all room/betting errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SilentReject(GameError):
    """A request that is dropped without telling the sender."""


# ---- reported ----

class InvalidId(GameError):
    def __init__(self):
        super().__init__('Room ID required')


class AlreadyExists(GameError):
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__('Room already exists')


class NotFound(GameError):
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__('Room not found')


class RoomFull(GameError):
    def __init__(self, max_players: int):
        self.max_players = max_players
        super().__init__(f'Room is full (max {max_players})')


class InsufficientFunds(GameError):
    def __init__(self, coins: int, amount: int):
        self.coins = coins
        self.amount = amount
        super().__init__('Not enough coins')


class NotHost(GameError):
    def __init__(self):
        super().__init__('Only host can roll')


# ---- silent ----

class UnknownPlayer(SilentReject):
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f'Player {player_id} is not in this room')


class InvalidBet(SilentReject):
    pass


class NothingStaked(SilentReject):
    pass


class EmptyMessage(SilentReject):
    def __init__(self):
        super().__init__('Empty chat message')
