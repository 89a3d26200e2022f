"""
Opt-in hot-path profiling for parsing and encoding.

Enabled by setting KVPARSE_PROFILE (ignored under ``python -O``). When
disabled, ProfileContext does nothing and the accessors return empty data.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "KVPARSE_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Per-function totals: calls, failures, time, characters and pairs."""

    function_name: str
    call_count: int = 0
    failed_calls: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0
    pairs_committed: int = 0

    def record_call(
        self,
        duration_ns: int,
        chars: int = 0,
        pairs: int = 0,
        failed: bool = False,
    ) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars
        self.pairs_committed += pairs
        if failed:
            self.failed_calls += 1

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    @property
    def pairs_per_call(self) -> float:
        """Average pairs handled by a successful call."""
        succeeded = self.call_count - self.failed_calls
        return self.pairs_committed / succeeded if succeeded else 0.0


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """
        Times one call of a hot path.

        The body reports what it handled through record(); a call that
        leaves by exception is counted as failed.
        """

        def __init__(self, func_name: str) -> None:
            self.func_name = func_name
            self.chars = 0
            self.pairs = 0
            self.start_time = 0

        def record(self, chars: int, pairs: int) -> None:
            self.chars = chars
            self.pairs = pairs

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.setdefault(
                self.func_name, HotPathStats(self.func_name)
            )
            stats.record_call(
                duration, self.chars, self.pairs, failed=exc_type is not None
            )

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the collected statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str) -> None:
            pass

        def record(self, chars: int, pairs: int) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
