"""Statistical outlier detection based on modified Z-scores."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from statistics import median

# 1.4826 converts the MAD to an estimator of the standard deviation;
# the second factor is the number of standard deviations.
OUTLIER_THRESHOLD = 1.4826 * 10.0


def modified_zscores(xs: Sequence[float]) -> list[float]:
    """Compute (x_i - median) / MAD for every value of a non-empty sample."""
    if not xs:
        raise ValueError("cannot compute Z-scores of an empty sample")
    x_median = median(xs)
    mad = median(abs(x - x_median) for x in xs)
    if not mad > 0.0:
        mad = sys.float_info.epsilon
    return [(x - x_median) / mad for x in xs]


def num_outliers(xs: Sequence[float]) -> int:
    """Count the values whose modified Z-score exceeds OUTLIER_THRESHOLD."""
    if not xs:
        return 0
    return sum(1 for score in modified_zscores(xs) if abs(score) > OUTLIER_THRESHOLD)