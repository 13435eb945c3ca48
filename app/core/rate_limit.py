"""Daily usage allowance for the interpreter.

Each client gets a fixed number of successful interpretations per rolling
24 hours. Checking and recording are separate steps: the allowance is
checked before the model is called and a use is recorded only once an
interpretation has been produced, so failed calls cost nothing.

State is in-memory and per-process; it resets on restart.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import TypeAlias

from app.core.exceptions import RateLimitedError

DAY_SECONDS = 24 * 60 * 60

ClientKey: TypeAlias = str  # Client host, or "unknown"


@dataclass(frozen=True)
class UsageLimit:
    """How many uses a client gets per window."""

    max_uses: int
    window_seconds: int = DAY_SECONDS


class UsageLimiter:
    """Tracks successful uses per client over a rolling window."""

    SWEEP_INTERVAL_SECONDS = 600

    def __init__(self) -> None:
        # Timestamps are appended in order, so the oldest use is always at the left
        self._uses: dict[ClientKey, deque[float]] = {}
        self._last_sweep = time.time()

    def _active_uses(self, client: ClientKey, limit: UsageLimit, now: float) -> deque[float]:
        uses = self._uses.get(client, deque())
        cutoff = now - limit.window_seconds
        while uses and uses[0] <= cutoff:
            uses.popleft()
        return uses

    def _sweep(self, limit: UsageLimit, now: float) -> None:
        """Forget clients whose uses have all expired."""
        if now - self._last_sweep < self.SWEEP_INTERVAL_SECONDS:
            return
        for client in list(self._uses):
            if not self._active_uses(client, limit, now):
                del self._uses[client]
        self._last_sweep = now

    def remaining(self, client: ClientKey, limit: UsageLimit) -> int:
        """Uses left for this client in the current window."""
        used = len(self._active_uses(client, limit, time.time()))
        return max(0, limit.max_uses - used)

    def ensure_available(self, client: ClientKey, limit: UsageLimit) -> None:
        """
        Reject the request up front when the allowance is used up.

        Raises:
            RateLimitedError: 429 with Retry-After set to when the oldest use expires
        """
        now = time.time()
        self._sweep(limit, now)

        uses = self._active_uses(client, limit, now)
        if len(uses) < limit.max_uses:
            return

        retry_after = int(uses[0] + limit.window_seconds - now) + 1 if uses else limit.window_seconds
        raise RateLimitedError(
            f"Daily interpretation limit reached. Try again in {retry_after} seconds.",
            retry_after=retry_after,
        )

    def record_use(self, client: ClientKey, limit: UsageLimit) -> int:
        """Count one successful use and return how many are left.

        A use past the limit is not recorded; concurrent requests that all
        passed `ensure_available` cannot push the count above the limit.
        """
        now = time.time()
        uses = self._active_uses(client, limit, now)
        if len(uses) < limit.max_uses:
            uses.append(now)
            self._uses[client] = uses
        return max(0, limit.max_uses - len(uses))

    def reset(self) -> None:
        """Forget all recorded uses."""
        self._uses.clear()


usage_limiter = UsageLimiter()
