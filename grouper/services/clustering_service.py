# grouper/services/clustering_service.py
"""
Service for agglomerative hierarchical clustering of rated entities.

The clusters with the most correlated ratings are merged two at a time
until a single root cluster remains. From the resulting merge tree the
service derives a per-level partition of the entities; independently of
the tree it can also report the distance between every pair of entities.
"""
from typing import Any, Dict, List, Optional, Tuple

from ..config import GrouperConfig, load_config
from ..domain.cluster import ClusterNode
from ..domain.distance_cache import DistanceCache
from ..domain.rank_vector import RankVector
from ..logging_config import get_logger
from ..utils.timing import Timer, timed
from .distance_service import PearsonCorrelationDistance
from .interfaces.distance_interface import IDistanceService
from .validation import validate_rating_table

logger = get_logger('clustering_service')

LevelPartition = List[List[List[str]]]


class HierarchicalClusteringService:
    """
    Builds a binary merge tree (dendrogram) over named rating vectors.

    Algorithm:
    1. Every entity starts as a leaf cluster, in input order
    2. Scan all active pairs (outer index ascending, inner index ascending)
       and pick the first pair with the smallest distance
    3. Replace that pair with a merged cluster appended to the active list
    4. Repeat until one cluster remains

    Pair distances are memoized per run. The scan is O(k^2) for k active
    clusters, O(n^3) overall.
    """

    def __init__(
        self,
        config: Optional[GrouperConfig] = None,
        distance_service: Optional[IDistanceService] = None
    ):
        """
        Initialize the clustering service.

        Args:
            config: Application configuration (defaults if omitted)
            distance_service: Metric used to compare clusters
        """
        self.config = config or load_config()

        if distance_service is None:
            self.distance_service = PearsonCorrelationDistance(
                fallback_distance=self.config.clustering.fallback_distance
            )
        else:
            self.distance_service = distance_service

    def build(self, data: Any) -> ClusterNode:
        """
        Cluster the entities into a merge tree.

        Args:
            data: Mapping of entity name -> mapping of feature key -> number

        Returns:
            Root of the merge tree. A single entity yields a single leaf.

        Raises:
            InvalidInputError: If the data is empty or malformed
        """
        table = validate_rating_table(data)
        logger.info(f"Starting hierarchical clustering of {len(table)} entities")

        cache = DistanceCache()
        clusters = self._build_initial_clusters(table)

        with Timer(f"Cluster tree for {len(table)} entities"):
            while len(clusters) > 1:
                first, second, distance = self._find_closest_clusters(clusters, cache)

                merged = ClusterNode.merge(first, second, distance)
                logger.debug(
                    f"Merged {first.all_names()} + {second.all_names()} "
                    f"at distance {distance:.4f}"
                )

                clusters.remove(first)
                clusters.remove(second)
                clusters.append(merged)

        root = clusters[0]
        logger.info(
            f"Built cluster tree of depth {root.depth()} "
            f"({len(cache)} distances computed)"
        )
        return root

    @timed("Distance matrix")
    def distance_matrix(self, data: Any) -> Dict[Tuple[str, str], float]:
        """
        Compute the distance between every pair of original entities.

        The result does not depend on any merge tree: only the entities'
        own ratings are compared.

        Args:
            data: Mapping of entity name -> mapping of feature key -> number

        Returns:
            Dict keyed by (name_a, name_b) with name_a before name_b in
            input order; n * (n - 1) / 2 entries

        Raises:
            InvalidInputError: If the data is empty or malformed
        """
        table = validate_rating_table(data)
        cache = DistanceCache()
        clusters = self._build_initial_clusters(table)

        distances: Dict[Tuple[str, str], float] = {}
        for index, cluster1 in enumerate(clusters):
            for cluster2 in clusters[index + 1:]:
                distances[(cluster1.name, cluster2.name)] = self._distance(
                    cluster1, cluster2, cache
                )

        logger.info(f"Computed {len(distances)} pairwise distances")
        return distances

    def level_partition(self, tree: ClusterNode) -> LevelPartition:
        """
        Flatten the merge tree into groups of decreasing affinity.

        Level 0 holds every entity in its own group. Each following level
        cuts the tree one edge closer to the root, so the subtree hanging
        at the cut depth becomes a single group. The last level is one
        group with every entity.

        Example:
            [
                [["A"], ["B"], ["C"]],     # highest affinity
                [["C"], ["A", "B"]],
                [["C", "A", "B"]]          # lowest affinity
            ]

        Args:
            tree: Root of a merge tree

        Returns:
            List of levels; depth + 1 levels in total
        """
        if tree.is_leaf():
            return [[tree.all_names()]]

        finest, depth = self._groups_up_to_level(tree, None)
        levels: LevelPartition = [finest]

        for max_level in range(depth - 1, 0, -1):
            groups, _ = self._groups_up_to_level(tree, max_level)
            levels.append(groups)

        levels.append([tree.all_names()])
        return levels

    def _groups_up_to_level(
        self,
        cluster: ClusterNode,
        max_level: Optional[int],
        level: int = 0
    ) -> Tuple[List[List[str]], int]:
        """
        Collect the groups visible when the tree is cut at ``max_level``.

        Nodes above the cut are descended; a node at the cut, or a leaf
        reached before it, becomes one group. ``None`` descends to the
        leaves.

        Returns:
            Tuple of (groups, deepest level reached)
        """
        if cluster.is_leaf() or (max_level is not None and level >= max_level):
            return [cluster.all_names()], level

        groups: List[List[str]] = []
        max_depth = level
        for child in (cluster.left, cluster.right):
            child_groups, child_depth = self._groups_up_to_level(child, max_level, level + 1)
            groups += child_groups
            max_depth = max(max_depth, child_depth)

        return groups, max_depth

    def _build_initial_clusters(self, table: Dict[str, Dict[str, float]]) -> List[ClusterNode]:
        return [
            ClusterNode.leaf(name, RankVector(ratings))
            for name, ratings in table.items()
        ]

    def _find_closest_clusters(
        self,
        clusters: List[ClusterNode],
        cache: DistanceCache
    ) -> Tuple[ClusterNode, ClusterNode, float]:
        """
        Find the pair of active clusters with the smallest distance.

        Ties go to the first pair encountered in the scan order, which
        keeps the tree shape deterministic for a given input order.
        """
        closest1_index = 0
        closest2_index = 1
        shortest_distance = self._distance(clusters[0], clusters[1], cache)

        for index1, cluster1 in enumerate(clusters):
            for index2 in range(index1 + 1, len(clusters)):
                distance = self._distance(cluster1, clusters[index2], cache)
                if distance < shortest_distance:
                    shortest_distance = distance
                    closest1_index = index1
                    closest2_index = index2

        return clusters[closest1_index], clusters[closest2_index], shortest_distance

    def _distance(self, cluster1: ClusterNode, cluster2: ClusterNode, cache: DistanceCache) -> float:
        """Distance between two clusters over their shared feature keys, memoized."""
        cached = cache.get(cluster1, cluster2)
        if cached is not None:
            return cached

        commons = cluster1.rankings.commons(cluster2.rankings)
        if commons:
            values1 = [pair[0] for pair in commons]
            values2 = [pair[1] for pair in commons]
            score = self.distance_service.distance(values1, values2)
        else:
            score = self.config.clustering.fallback_distance
            logger.debug(
                f"No shared keys between {cluster1.all_names()} and "
                f"{cluster2.all_names()}; using fallback distance {score}"
            )

        cache.put(cluster1, cluster2, score)
        return score
