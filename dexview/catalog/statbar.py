"""Ratio and colour bucket for a single bounded stat."""

from ..config import STAT_MAX
from .schemas import StatBarView, StatBucket


def stat_ratio(value: float, max_value: float = STAT_MAX) -> float:
    """Percentage of ``max_value`` reached, clamped to ``[0, 100]``."""
    if max_value <= 0:
        return 0.0
    return min(max(value / max_value, 0.0), 1.0) * 100


def stat_bucket(ratio: float) -> StatBucket:
    if ratio < 30:
        return "low"
    if ratio < 50:
        return "below-average"
    if ratio < 70:
        return "average"
    return "high"


def stat_bar(label: str, value: int, max_value: int = STAT_MAX) -> StatBarView:
    ratio = stat_ratio(value, max_value)
    return StatBarView(label=label, value=value, ratio=ratio, bucket=stat_bucket(ratio))
