from typing import Hashable, List, NamedTuple, Optional, Tuple

from .deck import Card


class RoundEntry(NamedTuple):
    identity: Hashable
    name: str
    card: str
    value: int


class RoundTracker:
    """Draws made during the current round, in the order they happened."""

    def __init__(self):
        self._entries: List[RoundEntry] = []

    @property
    def entries(self) -> Tuple[RoundEntry, ...]:
        return tuple(self._entries)

    def has_drawn(self, identity: Hashable) -> bool:
        return any(e.identity == identity for e in self._entries)

    def record(self, identity: Hashable, name: str, card: Card) -> Optional[RoundEntry]:
        """Append a draw. Returns None if this player already drew this round."""
        if self.has_drawn(identity):
            return None
        entry = RoundEntry(identity, name, card.label, card.value)
        self._entries.append(entry)
        return entry

    def discard(self, identity: Hashable) -> Optional[RoundEntry]:
        for i, entry in enumerate(self._entries):
            if entry.identity == identity:
                return self._entries.pop(i)
        return None

    def is_complete(self, alive_count: int) -> bool:
        return len(self._entries) == alive_count

    def reset(self) -> None:
        self._entries = []

    def resolve(self) -> Optional[RoundEntry]:
        """The round's loser: lowest value, earliest draw wins ties."""
        loser = None
        for entry in self._entries:
            # strict comparison keeps the first of equal values
            if loser is None or entry.value < loser.value:
                loser = entry
        return loser

    def __len__(self) -> int:
        return len(self._entries)
