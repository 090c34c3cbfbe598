"""Clock helpers shared by the timestamp and uuid7 transforms."""
import time

NS_PER_SECOND = 1_000_000_000
NS_PER_MS = 1_000_000


def now_ns() -> int:
    """Current UTC time as nanoseconds since the Unix epoch."""
    return time.time_ns()
