import time
from typing import List

import numpy as np


class Timer:
    """Wall-clock timer, started on creation"""

    def __init__(self, name: str = ""):
        self.name = name
        self.start_time = time.perf_counter()
        self.elapsed = None

    def stop(self) -> float:
        """Stop timer and return elapsed seconds"""
        self.elapsed = time.perf_counter() - self.start_time
        return self.elapsed

    def __str__(self):
        elapsed = self.elapsed if self.elapsed is not None else time.perf_counter() - self.start_time
        label = f"{self.name}: " if self.name else ""
        return f"{label}{elapsed * 1000:.1f} ms"


class Statistics:
    """Mean and sample standard deviation of the values added so far"""

    def __init__(self, name: str = ""):
        self.name = name
        self.values: List[float] = []

    def add(self, value: float):
        self.values.append(value)

    @property
    def mean(self) -> float:
        return float(np.mean(self.values)) if self.values else 0.0

    @property
    def std(self) -> float:
        if len(self.values) < 2:
            return 0.0
        return float(np.std(self.values, ddof=1))

    def __str__(self):
        return f"{self.name}: {self.mean:.1f} ± {self.std:.1f}"
