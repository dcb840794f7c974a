# grouper/services/interfaces/distance_interface.py
"""
Protocol interface for distance metrics.

The clustering service depends on this contract only, so alternative
metrics (or mocks in tests) can be injected.

Example usage:
    def my_function(metric: IDistanceService) -> float:
        return metric.distance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class IDistanceService(Protocol):
    """
    Protocol defining the distance metric interface.

    Implementations:
    - PearsonCorrelationDistance: 1 - Pearson correlation coefficient
    """

    def distance(self, values1: Sequence[float], values2: Sequence[float]) -> float:
        """
        Compute the dissimilarity of two equal-length value sequences.

        Args:
            values1: Values of the first vector at the shared keys
            values2: Values of the second vector at the same keys

        Returns:
            Distance; lower means more similar
        """
        ...
