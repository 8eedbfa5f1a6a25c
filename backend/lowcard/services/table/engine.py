import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Hashable, Optional

from lowcard.exceptions import (
    DeckExhausted,
    InvalidCommandState,
    LowCardException,
    UnregisteredSender,
)
from .deck import Deck
from .registry import PlayerRegistry
from .rounds import RoundTracker
from .timers import PhaseTimer


STATUS_IDLE = 'idle'
STATUS_RUNNING = 'running'

CMD_START = '!start'
CMD_JOIN = '!j'
CMD_DRAW = '!d'

WELCOME_MESSAGE = "Welcome! Please set a temporary username first."


@dataclass
class GameState:
    """Everything the room knows. Mutated by GameEngine only."""
    players: PlayerRegistry
    round: RoundTracker = field(default_factory=RoundTracker)
    status: str = STATUS_IDLE
    deck: Optional[Deck] = None

    @property
    def running(self) -> bool:
        return self.status == STATUS_RUNNING


class GameEngine:
    """State machine for the single shared table.

    Every public entry point and every timer tick runs under one re-entrant
    lock, so events are handled strictly one at a time in arrival order.
    """

    def __init__(self, gateway, join_seconds: int = 30, draw_seconds: int = 30,
                 max_name_length: int = 24, spawn=None, sleep=None,
                 rng: Optional[random.Random] = None, logger=None):
        self.gateway = gateway
        self.join_seconds = join_seconds
        self.draw_seconds = draw_seconds
        self.rng = rng
        self.logger = logger or logging.getLogger('lowcard')
        self.state = GameState(players=PlayerRegistry(max_name_length))
        self._lock = threading.RLock()
        self.join_timer = PhaseTimer('join', self._is_running, self._serialized, spawn, sleep)
        self.draw_timer = PhaseTimer('draw', self._is_running, self._serialized, spawn, sleep)

    # ---- inbound events ----

    def connect(self, identity: Hashable) -> None:
        self.gateway.message(WELCOME_MESSAGE, to=identity)

    def set_name(self, identity: Hashable, raw_name) -> str:
        with self._lock:
            name = self.state.players.register(identity, raw_name)
            self.logger.info(f"[player-register] name={name}")
            self.gateway.message(f"👤 {name} joined the room.")
            self._broadcast_roster()
            return name

    def handle_chat(self, identity: Hashable, raw_message) -> None:
        """Dispatch a chat line: one of the commands, or plain chat.

        Game errors are reported to the sender only.
        """
        with self._lock:
            text = str(raw_message or '').strip()
            try:
                if identity not in self.state.players:
                    raise UnregisteredSender(identity)
                if text == CMD_START:
                    self.start_game(identity)
                elif text == CMD_JOIN:
                    self.join_game(identity)
                elif text == CMD_DRAW:
                    self.draw_card(identity)
                else:
                    self.chat(identity, text)
            except LowCardException as exc:
                self.gateway.message(str(exc), to=identity)

    def disconnect(self, identity: Hashable) -> None:
        with self._lock:
            player = self.state.players.remove(identity)
            if not player:
                return
            # A vanished player no longer counts toward round completion
            self.state.round.discard(identity)
            self.logger.info(f"[player-disconnect] name={player.name} running={self.state.running}")
            self.gateway.message(f"❌ {player.name} disconnected.")
            self._broadcast_roster()

    def advance_clock(self, seconds: int = 1) -> None:
        """Tick both phase timers, one second at a time."""
        for _ in range(seconds):
            with self._lock:
                # a timer started during this second starts counting next second
                for timer in [t for t in (self.join_timer, self.draw_timer) if t.active]:
                    timer.tick()

    # ---- commands ----

    def start_game(self, identity: Hashable) -> None:
        if self.state.running:
            raise InvalidCommandState("⚠️ Game already running.")
        player = self.state.players.get(identity)
        self.state.status = STATUS_RUNNING
        self.state.deck = Deck.fresh(self.rng)
        self.state.players.revive_all()
        self.state.round.reset()
        self.draw_timer.cancel()
        self.logger.info(f"[game-start] by={player.name} players={len(self.state.players)}")
        self.gateway.message(
            f"🏏 Game started by {player.name}! Type !j to join within {self.join_seconds} seconds!"
        )
        self._start_timer(self.join_timer, self.join_seconds, self._on_join_tick, self._on_join_expired)
        self._broadcast_roster()

    def join_game(self, identity: Hashable) -> None:
        if not self.state.running:
            raise InvalidCommandState("⚠️ No game started. Type !start to begin.")
        player = self.state.players.get(identity)
        self.state.players.mark_alive(identity, True)
        self.gateway.message(f"✅ {player.name} joined the game.")
        self._broadcast_roster()

    def draw_card(self, identity: Hashable) -> None:
        if not self.state.running:
            raise InvalidCommandState("⚠️ No game running. Type !start to begin.")
        player = self.state.players.get(identity)
        if not player.alive:
            raise InvalidCommandState("❌ You are eliminated.")
        if self.state.round.has_drawn(identity):
            raise InvalidCommandState("⚠️ You already drew your card this round.")
        card = self._draw_from_deck()
        self.state.round.record(identity, player.name, card)
        self.gateway.message(f"🃏 {player.name} drew {card.label}")
        if self.state.round.is_complete(len(self.state.players.alive_ids())):
            self.draw_timer.cancel()
            self._resolve_round()

    def chat(self, identity: Hashable, text: str) -> None:
        player = self.state.players.get(identity)
        self.gateway.message(f"{player.name}: {text}")

    # ---- phases ----

    def _on_join_tick(self, remaining: int) -> None:
        self.gateway.message(f"⏱️ {remaining} seconds left to join!")

    def _on_join_expired(self) -> None:
        self.logger.info("[timer-expire] kind=join")
        self.gateway.message("✅ Join time ended. Round 1 begins! Type !d to draw your card!")
        self._start_timer(self.draw_timer, self.draw_seconds, self._on_draw_tick, self._on_draw_expired)

    def _on_draw_tick(self, remaining: int) -> None:
        self.gateway.message(f"⏱️ {remaining} seconds left to draw!")

    def _on_draw_expired(self) -> None:
        self.logger.info("[timer-expire] kind=draw")
        for identity in self.state.players.alive_ids():
            if self.state.round.has_drawn(identity):
                continue
            player = self.state.players.get(identity)
            try:
                card = self._draw_from_deck()
            except DeckExhausted as exc:
                self.gateway.message(str(exc))
                break
            self.state.round.record(identity, player.name, card)
            self.gateway.message(f"🃏 {player.name} auto-drew {card.label}")
        self._resolve_round()

    def _resolve_round(self) -> None:
        players = self.state.players
        self.join_timer.cancel()
        self.draw_timer.cancel()
        loser = self.state.round.resolve()
        if loser is not None:
            players.mark_alive(loser.identity, False)
            self.gateway.message(f"💀 {loser.name} is out (had {loser.card})")
        self.state.round.reset()

        remaining = players.alive_ids()
        self.logger.info(
            f"[round-resolve] loser={loser.name if loser else None} "
            f"value={loser.value if loser else None} remaining={len(remaining)}"
        )
        if len(remaining) == 1:
            winner = players.get(remaining[0])
            self.gateway.message(f"🏆 Congratulations {winner.name}! You won the game!")
            self._end_game()
        elif not remaining:
            self.gateway.message("⚠️ No players left. Game ended.")
            self._end_game()
        elif loser is None:
            # nobody could draw a card, another round would be the same
            self.logger.warning(f"[deck-exhausted] game ended remaining={len(remaining)}")
            self.gateway.message("🃏 The deck ran out. Game ended with no winner.")
            self._end_game()
        else:
            self.gateway.message(f"➡️ Next round! Type !d to draw within {self.draw_seconds} seconds!")
            self._start_timer(self.draw_timer, self.draw_seconds, self._on_draw_tick, self._on_draw_expired)
        self._broadcast_roster()

    def _end_game(self) -> None:
        self.state.status = STATUS_IDLE
        self.state.deck = None
        self.join_timer.cancel()
        self.draw_timer.cancel()
        self.logger.info("[game-end]")

    # ---- helpers ----

    def _start_timer(self, timer: PhaseTimer, duration: int, on_tick, on_expire) -> None:
        self.logger.info(f"[timer-set] kind={timer.kind} duration={duration}s")
        timer.start(duration, on_tick, on_expire)

    def _draw_from_deck(self):
        try:
            return self.state.deck.draw()
        except DeckExhausted:
            self.logger.warning(f"[deck-exhausted] alive={len(self.state.players.alive_ids())}")
            raise

    def _broadcast_roster(self) -> None:
        self.gateway.players(self.state.players.public_view())

    def _is_running(self) -> bool:
        return self.state.running

    def _serialized(self, fn, *args):
        with self._lock:
            return fn(*args)

    def snapshot(self) -> dict:
        with self._lock:
            if self.join_timer.active:
                phase, remaining = 'join', self.join_timer.remaining
            elif self.draw_timer.active:
                phase, remaining = 'draw', self.draw_timer.remaining
            else:
                phase, remaining = None, None
            return {
                'status': self.state.status,
                'phase': phase,
                'seconds_remaining': remaining,
                'deck_remaining': len(self.state.deck) if self.state.deck is not None else 0,
                'round_entries': len(self.state.round),
                'players': self.state.players.public_view(),
                'durations': {
                    'join': self.join_seconds,
                    'draw': self.draw_seconds,
                },
            }
