"""Table domain services: deck, players, rounds, phase timers and the engine.

Everything in this package is transport-free. Socket handlers and HTTP
routes talk to the GameEngine only; the engine composes the other pieces.
"""

from .deck import Card, Deck, build_deck, shuffle
from .registry import Player, PlayerRegistry, normalize_name
from .rounds import RoundEntry, RoundTracker
from .timers import PhaseTimer
from .engine import GameEngine

__all__ = [
    'Card', 'Deck', 'build_deck', 'shuffle',
    'Player', 'PlayerRegistry', 'normalize_name',
    'RoundEntry', 'RoundTracker',
    'PhaseTimer',
    'GameEngine',
]
