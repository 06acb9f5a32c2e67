"""
Opt-in hot path profiling for the grammar.

Enabled per config (`ParseConfig(profile=True)`) or for the whole process
with the `JSONTREE_PROFILE` environment variable. Disabled parsers are left
unwrapped, so profiling costs nothing unless requested.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONTREE_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


class ProfileContext:
    """
    Context manager for profiling hot paths.

    Set `chars` before leaving the block to attribute consumed input.
    """

    def __init__(self, func_name: str, chars: int = 0) -> None:
        self.func_name = func_name
        self.chars = chars
        self.start_time = 0

    def __enter__(self) -> "ProfileContext":
        self.start_time = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter_ns() - self.start_time
        if self.func_name not in _hot_path_stats:
            _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
        _hot_path_stats[self.func_name].record_call(duration, self.chars)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    """Clears profiling statistics."""
    _hot_path_stats.clear()
