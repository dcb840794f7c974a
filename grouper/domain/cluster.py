# grouper/domain/cluster.py
"""
Domain model for a node of the merge tree (dendrogram).
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .rank_vector import RankVector


@dataclass(frozen=True, eq=False)
class ClusterNode:
    """
    A leaf (one original entity) or an internal node (a merged pair).

    Nodes compare and hash by identity: two clusters carrying identical
    rankings are still distinct clusters.

    Attributes:
        rankings: Aggregated ratings of every entity below this node
        left: Left child (internal nodes only)
        right: Right child (internal nodes only)
        distance: Distance between the two children when they were merged
        name: Entity name (leaves only)
    """
    rankings: RankVector
    left: Optional['ClusterNode'] = None
    right: Optional['ClusterNode'] = None
    distance: Optional[float] = None
    name: Optional[str] = None

    def __post_init__(self):
        """Enforce that a node is a leaf iff it has a name and no children."""
        if self.name is not None:
            if self.left is not None or self.right is not None:
                raise ValueError(f"Leaf cluster {self.name!r} cannot have children")
        else:
            if self.left is None or self.right is None:
                raise ValueError("Internal cluster needs both a left and a right child")
            if self.distance is None:
                raise ValueError("Internal cluster needs a merge distance")

    @classmethod
    def leaf(cls, name: str, rankings: RankVector) -> 'ClusterNode':
        """Create the leaf cluster of one original entity."""
        return cls(rankings=rankings, name=name)

    @classmethod
    def merge(cls, left: 'ClusterNode', right: 'ClusterNode', distance: float) -> 'ClusterNode':
        """
        Create the parent cluster of two merged clusters.

        The merged rankings are left-biased: every key of the left child is
        averaged with the right child's value (0.0 when the right child has
        no value for it), and keys only the right child has are dropped.

        Args:
            left: First merged cluster
            right: Second merged cluster
            distance: Distance between the two clusters

        Returns:
            New internal ClusterNode owning both children
        """
        averaged = {
            key: (left.rankings.get(key) + right.rankings.get(key, 0.0)) / 2.0
            for key in left.rankings.keys()
        }
        return cls(
            rankings=RankVector(averaged),
            left=left,
            right=right,
            distance=distance,
        )

    def is_leaf(self) -> bool:
        """Check if this node is an original entity."""
        return self.name is not None

    def all_names(self) -> List[str]:
        """Return every leaf name below this node, left subtree first."""
        if self.is_leaf():
            return [self.name]
        return self.left.all_names() + self.right.all_names()

    def depth(self) -> int:
        """Number of edges between this node and its deepest leaf."""
        if self.is_leaf():
            return 0
        return 1 + max(self.left.depth(), self.right.depth())

    def iter_nodes(self) -> Iterator['ClusterNode']:
        """Yield this node and all its descendants in pre-order, left first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf():
                stack.append(node.right)
                stack.append(node.left)

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"ClusterNode(name={self.name!r})"
        return f"ClusterNode(distance={self.distance!r}, names={self.all_names()!r})"
