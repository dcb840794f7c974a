# Domain models for Grouper
from .rank_vector import RankVector
from .cluster import ClusterNode
from .distance_cache import DistanceCache

__all__ = [
    'RankVector',
    'ClusterNode',
    'DistanceCache'
]
