"""Game exceptions.

Raised by the table services and turned into sender-only warning messages
at the engine's dispatch point. None of them is fatal to the room.
"""


class LowCardException(Exception):
    """Base class for every game error."""
    pass


class InvalidCommandState(LowCardException):
    """Command issued while the game or the player is in the wrong state."""
    pass


class UnregisteredSender(LowCardException):
    """Command or chat from a connection that has not set a name."""

    def __init__(self, identity=None):
        self.identity = identity
        super().__init__("⚠️ You must set a username first.")


class DeckExhausted(LowCardException):
    """No cards left to draw."""

    def __init__(self):
        super().__init__("⚠️ The deck is empty, no card could be drawn.")
