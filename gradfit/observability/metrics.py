#!filepath: gradfit/observability/metrics.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from gradfit.utils.logger import logs

Point = Tuple[int, float]


@dataclass
class MetricRecorder:
    """
    Metrics of one fit call.

    - record(name, value)        final scalar, logged once
    - observe(name, step, value) one point of a per-iteration series,
                                 kept in memory only
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)
    series: Dict[str, List[Point]] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def observe(self, name: str, step: int, value: float):
        if not self.enabled:
            return
        points = self.series.setdefault(name, [])
        if points and step <= points[-1][0]:
            raise ValueError(f"metric {name} step {step} is not after step {points[-1][0]}")
        points.append((step, float(value)))

    def get(self, name: str, default: Any = None) -> Any:
        return self.metrics.get(name, default)

    def history(self, name: str) -> List[Point]:
        return list(self.series.get(name, ()))

    def best(self, name: str) -> Optional[Point]:
        """Lowest finite point of a series (cost-like metrics)."""
        finite = [p for p in self.series.get(name, ()) if math.isfinite(p[1])]
        if not finite:
            return None
        return min(finite, key=lambda p: p[1])
