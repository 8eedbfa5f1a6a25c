import random
from typing import List, NamedTuple, Optional, Sequence

from lowcard.exceptions import DeckExhausted


SUITS = ('♠', '♥', '♦', '♣')
RANKS = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')


class Card(NamedTuple):
    label: str
    value: int


def build_deck() -> List[Card]:
    """All 52 cards, suit by suit. Value is the rank position plus two (A=14)."""
    return [Card(f"{rank}{suit}", RANKS.index(rank) + 2) for suit in SUITS for rank in RANKS]


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a Fisher-Yates shuffled copy of ``cards``."""
    rng = rng or random
    out = list(cards)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out


class Deck:
    """Shuffled cards for one game. Cards are drawn from the end."""

    def __init__(self, cards: Sequence[Card] = ()):
        self._cards: List[Card] = list(cards)

    @classmethod
    def fresh(cls, rng: Optional[random.Random] = None) -> 'Deck':
        return cls(shuffle(build_deck(), rng))

    def draw(self) -> Card:
        if not self._cards:
            raise DeckExhausted()
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)
