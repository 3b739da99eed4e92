"""Frame clock turning animation timestamps into elapsed time."""


class FrameClock:
    """Tracks the previous frame timestamp, in milliseconds.

    The first tick measures from ``start`` (0 by default), the same way a
    browser animation loop measures its first frame from zero.
    """

    def __init__(self, start: float = 0.0):
        self.previous = start

    def tick(self, timestamp: float) -> float:
        """Record ``timestamp`` and return the time since the last tick."""
        if timestamp < self.previous:
            raise ValueError(
                f"frame timestamps must not go backwards: {timestamp} < {self.previous}"
            )
        dt = timestamp - self.previous
        self.previous = timestamp
        return dt
