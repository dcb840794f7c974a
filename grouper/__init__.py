"""
Grouper: hierarchical clustering of entities by the correlation of their
ratings.
"""
from .config import FALLBACK_DISTANCE, GrouperConfig, load_config
from .exceptions import GrouperError, InvalidInputError, DegenerateDistanceError
from .domain import RankVector, ClusterNode, DistanceCache
from .services import (
    PearsonCorrelationDistance,
    HierarchicalClusteringService,
    IngestionService,
    ExportService,
)
from .grouper import Grouper

__version__ = "1.0.0"

__all__ = [
    'FALLBACK_DISTANCE',
    'GrouperConfig',
    'load_config',
    'GrouperError',
    'InvalidInputError',
    'DegenerateDistanceError',
    'RankVector',
    'ClusterNode',
    'DistanceCache',
    'PearsonCorrelationDistance',
    'HierarchicalClusteringService',
    'IngestionService',
    'ExportService',
    'Grouper',
]
