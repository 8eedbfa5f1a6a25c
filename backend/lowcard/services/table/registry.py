from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional


DEFAULT_NAME = 'Guest'


@dataclass
class Player:
    name: str
    alive: bool = True

    def to_dict(self):
        return {
            'name': self.name,
            'alive': self.alive,
        }


def normalize_name(raw_name, max_length: int = 24) -> str:
    """Trim, cap and default a client supplied display name."""
    name = ''.join(ch for ch in str(raw_name or DEFAULT_NAME) if ch.isprintable())
    name = name.strip()[:max_length]
    return name or DEFAULT_NAME


class PlayerRegistry:
    """Connection id -> Player, in join order.

    Identities are opaque: only equality and hashing are used.
    """

    def __init__(self, max_name_length: int = 24):
        self.max_name_length = max_name_length
        self._players: Dict[Hashable, Player] = {}

    def register(self, identity: Hashable, raw_name) -> str:
        name = normalize_name(raw_name, self.max_name_length)
        existing = self._players.get(identity)
        if existing:
            # Keep roster position on rename
            existing.name = name
            existing.alive = True
        else:
            self._players[identity] = Player(name=name)
        return name

    def get(self, identity: Hashable) -> Optional[Player]:
        return self._players.get(identity)

    def mark_alive(self, identity: Hashable, alive: bool) -> None:
        player = self._players.get(identity)
        if player:
            player.alive = alive

    def revive_all(self) -> None:
        for player in self._players.values():
            player.alive = True

    def remove(self, identity: Hashable) -> Optional[Player]:
        return self._players.pop(identity, None)

    def alive_ids(self) -> List[Hashable]:
        return [identity for identity, p in self._players.items() if p.alive]

    def public_view(self) -> List[dict]:
        return [p.to_dict() for p in self._players.values()]

    def __contains__(self, identity) -> bool:
        return identity in self._players

    def __len__(self) -> int:
        return len(self._players)
