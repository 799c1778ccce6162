import logging

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter


class QuotaLimiter:
    """Per-caller request budget, replenished every `duration` seconds."""

    def __init__(self, points: int, duration: int):
        self.item = RateLimitItemPerSecond(points, duration)
        self.storage = MemoryStorage()
        self.strategy = FixedWindowRateLimiter(self.storage)

    def consume(self, key: str) -> bool:
        allowed = self.strategy.hit(self.item, key)
        if not allowed:
            logging.warning(f"[QUOTA] Budget exhausted for {key} ({self.item})")
        return allowed
