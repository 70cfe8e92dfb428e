"""Wall clock adapter."""

import pendulum


class SystemClock:
    """
    Reads the system clock in a fixed timezone.

    Implements Clock protocol.
    """

    def __init__(self, timezone: str = "local"):
        self.timezone = timezone

    def now(self) -> pendulum.DateTime:
        return pendulum.now(self.timezone)
