"""Rolling time window statistics."""

import math
from typing import Dict, NamedTuple, Optional, Tuple

from .errors import OutOfOrderError, WindowConfigError
from .logging import get_logger

logger = get_logger(__name__)


class Observation(NamedTuple):
    """A single (timestamp, value) pair."""
    timestamp: float
    value: float


class RollingWindow:
    """Count, sum, min and max over the observations of the last ``tau`` time units.

    Observations must be put in non-decreasing timestamp order. Anything at
    least ``tau`` older than the latest observation is evicted.
    """

    def __init__(self, tau: float):
        """
        Initialize rolling window.

        Args:
            tau: Window duration, in the same unit as the timestamps

        Raises:
            WindowConfigError: If tau is not a positive finite number
        """
        if isinstance(tau, bool) or not isinstance(tau, (int, float)):
            raise WindowConfigError(tau)
        if not math.isfinite(tau) or tau <= 0:
            raise WindowConfigError(tau)

        self._tau = tau
        self._observations = []
        self._sum = 0.0
        self._min: Optional[float] = None
        self._max: Optional[float] = None

    @property
    def tau(self) -> float:
        return self._tau

    @property
    def count(self) -> int:
        return len(self._observations)

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def min(self) -> Optional[float]:
        return self._min

    @property
    def max(self) -> Optional[float]:
        return self._max

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(self._observations)

    @property
    def latest(self) -> Optional[Observation]:
        return self._observations[-1] if self._observations else None

    def __len__(self) -> int:
        return len(self._observations)

    def put(self, timestamp: float, value: float) -> None:
        """
        Add an observation and evict the ones that fell out of the window.

        While the oldest buffered observation is still inside the window the
        aggregates are updated in place. Otherwise sum, min and max are
        rebuilt from the retained observations, since min and max cannot be
        un-folded when an element leaves.

        Args:
            timestamp: Observation timestamp
            value: Observation value

        Raises:
            OutOfOrderError: If timestamp is older than the latest observation
        """
        if self._observations and timestamp < self._observations[-1].timestamp:
            raise OutOfOrderError(timestamp, self._observations[-1].timestamp)

        self._observations.append(Observation(timestamp, value))
        # Elapsed time; timestamp - tau rounds to timestamp for large values
        if timestamp - self._observations[0].timestamp < self._tau:
            self._sum += value
            self._min = value if self._min is None else min(self._min, value)
            self._max = value if self._max is None else max(self._max, value)
            return

        total = 0.0
        lo: Optional[float] = None
        hi: Optional[float] = None
        # Expired observations form a prefix; start is the first one kept
        start = 0
        for obs in self._observations:
            if timestamp - obs.timestamp >= self._tau:
                start += 1
                continue
            total += obs.value
            lo = obs.value if lo is None else min(lo, obs.value)
            hi = obs.value if hi is None else max(hi, obs.value)

        self._observations = self._observations[start:]
        self._sum = total
        self._min = lo
        self._max = hi
        logger.debug("Evicted %d observation(s) at t=%s, %d retained",
                     start, timestamp, len(self._observations))

    def stats(self) -> Dict[str, Optional[float]]:
        """
        Current rolling statistics.

        Returns:
            Dictionary with n (count), sum, min and max keys; min and max
            are None until the first observation
        """
        return {
            "n": len(self._observations),
            "sum": self._sum,
            "min": self._min,
            "max": self._max,
        }
