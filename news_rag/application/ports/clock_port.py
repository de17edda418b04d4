from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Time source for turn timestamps and recency scoring.

    Only ``now`` must be provided; tests pin it to a fixed instant.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Timezone-aware current time (UTC)."""

    def now_ms(self) -> int:
        """``now()`` as integer milliseconds since the Unix epoch."""
        return int(self.now().timestamp() * 1000)
