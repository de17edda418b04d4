from datetime import UTC, datetime

from news_rag.application.ports.clock_port import ClockPort


class SystemClock(ClockPort):
    """Wall clock in UTC. The composition root is the only place that builds one."""

    def now(self) -> datetime:
        return datetime.now(UTC)
