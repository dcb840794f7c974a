# grouper/domain/distance_cache.py
"""
Memo of pairwise cluster distances for a single clustering run.
"""
from typing import Dict, FrozenSet, Optional

from .cluster import ClusterNode


class DistanceCache:
    """
    Stores the distance of each unordered pair of clusters.

    Pairs are keyed by cluster identity, so the entry for (a, b) is the
    entry for (b, a). Entries are written once. A new cache is created for
    every run and is never shared between runs.
    """

    def __init__(self):
        self._distances: Dict[FrozenSet[ClusterNode], float] = {}

    @staticmethod
    def _key(a: ClusterNode, b: ClusterNode) -> FrozenSet[ClusterNode]:
        return frozenset((a, b))

    def get(self, a: ClusterNode, b: ClusterNode) -> Optional[float]:
        """Return the stored distance for the pair, or None."""
        return self._distances.get(self._key(a, b))

    def put(self, a: ClusterNode, b: ClusterNode, distance: float) -> None:
        """
        Store the distance for the pair.

        Raises:
            KeyError: If the pair already has a stored distance
        """
        key = self._key(a, b)
        if key in self._distances:
            raise KeyError("Distance for this cluster pair is already cached")
        self._distances[key] = distance

    def __contains__(self, pair) -> bool:
        a, b = pair
        return self._key(a, b) in self._distances

    def __len__(self) -> int:
        return len(self._distances)
