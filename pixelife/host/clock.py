"""Fixed-interval step timing, independent of the render rate."""


class FixedStepClock:
    """Decides when the next generation is due.

    The host checks `due()` once per frame. At most one step is reported
    per check and intervals missed while the host was busy are dropped,
    so a slow frame never causes a burst of generations.
    """

    def __init__(self, interval_ms: int, start_ms: int = 0):
        if interval_ms <= 0:
            raise ValueError(f"Step interval must be positive, got {interval_ms} ms")
        self.interval_ms = interval_ms
        self.last_step_ms = start_ms

    def due(self, now_ms: int) -> bool:
        """Return True if a step is due at `now_ms`, and restart the interval if so."""
        if now_ms - self.last_step_ms >= self.interval_ms:
            self.last_step_ms = now_ms
            return True
        return False

    def reset(self, now_ms: int) -> None:
        self.last_step_ms = now_ms
