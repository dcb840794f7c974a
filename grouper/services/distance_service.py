# grouper/services/distance_service.py
"""
Pearson-correlation based distance between two rating sequences.
"""
from typing import Sequence

import numpy as np

from ..config import FALLBACK_DISTANCE
from ..exceptions import DegenerateDistanceError, InvalidInputError
from ..logging_config import get_logger

logger = get_logger('distance_service')


class PearsonCorrelationDistance:
    """
    Distance metric defined as ``1 - r`` where r is the Pearson
    correlation coefficient of the two sequences.

    Perfectly correlated ratings have distance 0.0, uncorrelated ratings
    1.0 and perfectly anti-correlated ratings 2.0.

    When either sequence has no variance the correlation is undefined and
    the configured fallback distance is returned instead (0.0 by default,
    i.e. the pair is treated as maximally similar).
    """

    def __init__(self, fallback_distance: float = FALLBACK_DISTANCE):
        """
        Initialize the metric.

        Args:
            fallback_distance: Distance reported for zero-variance input
        """
        self.fallback_distance = fallback_distance

    def distance(self, values1: Sequence[float], values2: Sequence[float]) -> float:
        """
        Compute the correlation distance.

        Args:
            values1: Values of the first vector at the shared keys
            values2: Values of the second vector at the same keys

        Returns:
            1 - r, or the fallback distance when r is undefined

        Raises:
            InvalidInputError: If the sequences are empty or differ in length
        """
        try:
            return 1.0 - self.correlation(values1, values2)
        except DegenerateDistanceError as e:
            logger.debug(f"{e}; using fallback distance {self.fallback_distance}")
            return self.fallback_distance

    def correlation(self, values1: Sequence[float], values2: Sequence[float]) -> float:
        """
        Compute the Pearson correlation coefficient.

        Args:
            values1: First sequence
            values2: Second sequence

        Returns:
            Correlation coefficient in [-1, 1]

        Raises:
            InvalidInputError: If the sequences are empty or differ in length
            DegenerateDistanceError: If either sequence has zero variance
        """
        x = np.asarray(values1, dtype=float)
        y = np.asarray(values2, dtype=float)

        if x.size != y.size:
            raise InvalidInputError(
                f"Cannot correlate sequences of different length ({x.size} vs {y.size})"
            )
        n = x.size
        if n == 0:
            raise InvalidInputError("Cannot correlate empty sequences")

        sum1 = x.sum()
        sum2 = y.sum()

        variance_product = (
            (np.dot(x, x) - sum1 ** 2 / n) *
            (np.dot(y, y) - sum2 ** 2 / n)
        )
        # Rounding can push a zero variance slightly below zero
        if variance_product <= 0:
            raise DegenerateDistanceError("Zero variance in rating sequence")

        numerator = np.dot(x, y) - sum1 * sum2 / n
        # Rounding can push r just outside [-1, 1]
        return float(np.clip(numerator / np.sqrt(variance_product), -1.0, 1.0))
