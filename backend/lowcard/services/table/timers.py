from typing import Callable, Optional


# Remaining-seconds values that produce a warning callback
WARNING_SECONDS = (10, 5, 3, 1)


class PhaseTimer:
    """One-second countdown for a single phase kind (join or draw).

    - ``start`` always cancels the previous countdown of this timer first
    - a generation token makes ticks queued by a cancelled countdown no-ops
    - ``on_tick(remaining)`` fires at 10, 5, 3 and 1 seconds left
    - ``on_expire()`` fires once, on the tick after remaining reaches zero
    - if ``is_running()`` turns false the timer cancels itself silently

    With a ``spawn`` function the countdown runs as a background task that
    sleeps one second between ticks and pushes every tick through
    ``dispatch`` (the engine's lock). Without one, nothing is scheduled and
    the owner calls ``tick()`` itself.
    """

    def __init__(self, kind: str, is_running: Callable[[], bool],
                 dispatch: Optional[Callable] = None,
                 spawn: Optional[Callable] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        self.kind = kind
        self._is_running = is_running
        self._dispatch = dispatch or (lambda fn, *args: fn(*args))
        self._spawn = spawn
        self._sleep = sleep
        self._generation = 0
        self._active = False
        self._remaining = 0
        self._on_tick = None
        self._on_expire = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def remaining(self) -> Optional[int]:
        return self._remaining if self._active else None

    def start(self, duration: int, on_tick: Callable[[int], None], on_expire: Callable[[], None]) -> None:
        self.cancel()
        self._generation += 1
        self._remaining = int(duration)
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._active = True
        if self._spawn is not None:
            self._spawn(self._run, self._generation)

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._generation += 1
        self._on_tick = None
        self._on_expire = None

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self._active:
            return
        if not self._is_running():
            self.cancel()
            return
        if self._remaining in WARNING_SECONDS:
            self._on_tick(self._remaining)
        self._remaining -= 1
        if self._remaining < 0:
            on_expire = self._on_expire
            self.cancel()
            on_expire()

    def _tick_if_current(self, generation: int) -> bool:
        if generation != self._generation:
            return False
        self.tick()
        return self._active and generation == self._generation

    def _run(self, generation: int) -> None:
        while True:
            self._sleep(1)
            if not self._dispatch(self._tick_if_current, generation):
                return
