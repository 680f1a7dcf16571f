from typing import Dict, List, NamedTuple, Sequence

SYMBOLS: List[str] = ['tiger', 'gourd', 'rooster', 'shrimp', 'crab', 'fish']


class Settlement(NamedTuple):
    total_staked: int
    payout: int
    net: int

    def to_dict(self):
        return {
            'totalStaked': self.total_staked,
            'payout': self.payout,
            'net': self.net,
        }


def _stake(value) -> int:
    try:
        stake = int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, stake)


def settle(draw: Sequence[str], bet: Dict[str, int]) -> Settlement:
    """Settle one player's bets against a draw.

    Each stake pays back stake * (number of times its symbol was drawn), so a
    symbol showing twice pays double and a missing symbol pays nothing. Stakes
    were taken from the player when the bet was placed, hence ``net`` is the
    payout minus everything staked.
    """
    bet = bet or {}
    counts = {s: 0 for s in SYMBOLS}
    for symbol in draw:
        if symbol in counts:
            counts[symbol] += 1

    total_staked = sum(_stake(bet.get(s)) for s in SYMBOLS)
    payout = sum(_stake(bet.get(s)) * counts[s] for s in SYMBOLS)
    return Settlement(total_staked, payout, payout - total_staked)
