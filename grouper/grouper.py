# grouper/grouper.py
"""
High level entry point bundling parsing, clustering and distances.
"""
from functools import cached_property
from typing import Any, Dict, Optional, Tuple

from .config import GrouperConfig, load_config
from .domain.cluster import ClusterNode
from .services.clustering_service import HierarchicalClusteringService, LevelPartition
from .services.ingestion_service import IngestionService
from .services.validation import validate_rating_table


class Grouper:
    """
    Clusters one rating table and caches the results.

    Usage:
        grouper = Grouper(open('movies.json').read())
        grouper.clusters       # level partition, highest affinity first
        grouper.cluster_tree   # root ClusterNode
        grouper.distances      # {(name_a, name_b): distance}
    """

    def __init__(
        self,
        data: Any,
        service: Optional[HierarchicalClusteringService] = None,
        config: Optional[GrouperConfig] = None
    ):
        """
        Args:
            data: Rating table as a mapping, or as JSON text/bytes
            service: Clustering service to use
            config: Configuration for the default service

        Raises:
            InvalidInputError: If the data cannot be decoded or is malformed
        """
        if isinstance(data, (str, bytes)):
            self.data = IngestionService().parse_json(data)
        else:
            self.data = validate_rating_table(data)

        self.service = service or HierarchicalClusteringService(config or load_config())

    @cached_property
    def cluster_tree(self) -> ClusterNode:
        """Root of the merge tree."""
        return self.service.build(self.data)

    @cached_property
    def clusters(self) -> LevelPartition:
        """Groups of entities per affinity level."""
        return self.service.level_partition(self.cluster_tree)

    @cached_property
    def distances(self) -> Dict[Tuple[str, str], float]:
        """Distance between every pair of entities."""
        return self.service.distance_matrix(self.data)
