# grouper/domain/rank_vector.py
"""
Domain model for the sparse ratings of one entity or merged cluster.
"""
from typing import Dict, List, Mapping, Optional, Tuple


class RankVector:
    """
    Immutable sparse mapping of feature key -> numeric value.

    Keys keep the order in which they were supplied, so ``keys()`` and
    ``commons()`` are reproducible across calls.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Optional[Mapping[str, float]] = None):
        self._values: Dict[str, float] = {
            key: float(value) for key, value in (values or {}).items()
        }

    def get(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Return the value stored for ``key``, or ``default``."""
        return self._values.get(key, default)

    def keys(self) -> List[str]:
        """Return the feature keys in insertion order."""
        return list(self._values)

    def commons(self, other: 'RankVector') -> List[Tuple[float, float]]:
        """
        Pair up the values of every key present in both vectors.

        Args:
            other: Vector to intersect with

        Returns:
            List of (value_from_self, value_from_other) in the key order of
            this vector. Empty when the vectors share no keys.
        """
        return [
            (value, other._values[key])
            for key, value in self._values.items()
            if key in other._values
        ]

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RankVector({self._values!r})"
