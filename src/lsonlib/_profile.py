"""
Opt-in timing of the parse and encode entry points.

Set ``LSONLIB_PROFILE`` in the environment before import to collect
per-operation statistics; ``get_hot_path_stats`` returns a snapshot keyed
by operation name (``parse_json``, ``parse_table``, ``scan_string``, ...).
Without the variable, ``ProfileContext`` is a shared no-op instance and
nothing is recorded.
"""

import os
import time
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "LSONLIB_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one profiled operation."""

    function_name: str
    call_count: int = 0
    failed_calls: int = 0
    total_time_ns: int = 0
    max_time_ns: int = 0
    chars_processed: int = 0

    def record_call(
        self, duration_ns: int, chars: int = 0, failed: bool = False
    ) -> None:
        """Adds one call; ``failed`` marks a call that ended in an exception."""
        self.call_count += 1
        self.failed_calls += int(failed)
        self.total_time_ns += duration_ns
        self.max_time_ns = max(self.max_time_ns, duration_ns)
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    @property
    def chars_per_second(self) -> float:
        if not self.total_time_ns:
            return 0.0
        return self.chars_processed * 1e9 / self.total_time_ns


_hot_path_stats: dict[str, HotPathStats] = {}


class _Timer:
    __slots__ = ("name", "chars", "start_ns")

    def __init__(self, name: str, chars: int) -> None:
        self.name = name
        self.chars = chars
        self.start_ns = 0

    def __enter__(self) -> "_Timer":
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter_ns() - self.start_ns
        stats = _hot_path_stats.get(self.name)
        if stats is None:
            stats = _hot_path_stats[self.name] = HotPathStats(self.name)
        stats.record_call(duration, self.chars, failed=exc_type is not None)


class _NullTimer:
    __slots__ = ()

    def __enter__(self) -> "_NullTimer":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        return None


_NULL_TIMER = _NullTimer()


def ProfileContext(name: str, chars: int = 0) -> _Timer | _NullTimer:  # noqa: N802
    """Times the enclosed block under ``name`` when profiling is enabled."""
    if PROFILE_HOT_PATHS:
        return _Timer(name, chars)
    return _NULL_TIMER


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a copy of the statistics collected so far."""
    return {name: replace(stats) for name, stats in _hot_path_stats.items()}


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
