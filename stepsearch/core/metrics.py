# stepsearch/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any] = field(default_factory=list)
    cost: float = float("inf")
    steps: int = 0
    explored: int = 0
    frontier: int = 0
    max_path_cost: float = 0.0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """Flat dict for JSON output; the path is reported by length only."""
        row = asdict(self)
        row["path_len"] = len(row.pop("path"))
        if row["cost"] == float("inf"):
            row["cost"] = None
        return row


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._tracing = not tracemalloc.is_tracing()
        if self._tracing:
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
