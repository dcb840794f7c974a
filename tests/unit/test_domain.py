"""
Unit tests for the domain models: RankVector, ClusterNode, DistanceCache.
"""

import dataclasses

import pytest

from grouper.domain import ClusterNode, DistanceCache, RankVector


def leaf(name: str, **ratings) -> ClusterNode:
    """Helper to create a leaf cluster."""
    return ClusterNode.leaf(name, RankVector(ratings))


class TestRankVector:
    """Tests for RankVector."""

    def test_values_are_floats(self):
        vector = RankVector({"a": 1, "b": 2.5})
        assert vector.get("a") == 1.0
        assert isinstance(vector.get("a"), float)

    def test_get_default(self):
        vector = RankVector({"a": 1})
        assert vector.get("missing") is None
        assert vector.get("missing", 0.0) == 0.0

    def test_keys_keep_insertion_order(self):
        assert RankVector({"z": 1, "a": 2, "m": 3}).keys() == ["z", "a", "m"]

    def test_commons_pairs_values_in_own_key_order(self):
        first = RankVector({"x": 1, "y": 2, "z": 3})
        second = RankVector({"z": 30, "w": 0, "x": 10})
        assert first.commons(second) == [(1.0, 10.0), (3.0, 30.0)]
        assert second.commons(first) == [(30.0, 3.0), (10.0, 1.0)]

    def test_commons_empty_when_no_shared_keys(self):
        assert RankVector({"a": 1}).commons(RankVector({"b": 1})) == []

    def test_source_mapping_changes_do_not_leak(self):
        source = {"a": 1.0}
        vector = RankVector(source)
        source["a"] = 99.0
        source["b"] = 2.0
        assert vector.get("a") == 1.0
        assert len(vector) == 1


class TestClusterNode:
    """Tests for ClusterNode."""

    def test_leaf(self):
        node = leaf("A", k=1)
        assert node.is_leaf()
        assert node.all_names() == ["A"]
        assert node.depth() == 0
        assert node.distance is None

    def test_merge_is_left_biased_average(self):
        """Keys only in the right child are dropped; missing right values count as 0."""
        left = leaf("L", a=1.0, b=3.0)
        right = leaf("R", a=3.0, c=5.0)

        merged = ClusterNode.merge(left, right, 0.25)

        assert not merged.is_leaf()
        assert merged.rankings.keys() == ["a", "b"]
        assert merged.rankings.get("a") == 2.0
        assert merged.rankings.get("b") == 1.5
        assert merged.rankings.get("c") is None
        assert merged.distance == 0.25

    def test_all_names_left_first(self):
        inner = ClusterNode.merge(leaf("B", k=1), leaf("C", k=1), 0.1)
        root = ClusterNode.merge(leaf("A", k=1), inner, 0.5)
        assert root.all_names() == ["A", "B", "C"]
        assert root.all_names() == root.all_names()
        assert root.depth() == 2

    def test_iter_nodes_visits_every_node(self):
        inner = ClusterNode.merge(leaf("B", k=1), leaf("C", k=1), 0.1)
        root = ClusterNode.merge(leaf("A", k=1), inner, 0.5)
        nodes = list(root.iter_nodes())
        assert nodes[0] is root
        assert [n.name for n in nodes if n.is_leaf()] == ["A", "B", "C"]
        assert len(nodes) == 5

    def test_identity_equality(self):
        a = leaf("A", k=1)
        b = leaf("A", k=1)
        assert a != b
        assert len({a, b}) == 2

    def test_nodes_are_immutable(self):
        node = leaf("A", k=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "B"

    def test_leaf_cannot_have_children(self):
        child = leaf("B", k=1)
        with pytest.raises(ValueError):
            ClusterNode(rankings=RankVector({"k": 1}), left=child, name="A")

    def test_internal_node_needs_two_children(self):
        with pytest.raises(ValueError):
            ClusterNode(rankings=RankVector({"k": 1}), left=leaf("A", k=1), distance=0.1)

    def test_internal_node_needs_distance(self):
        with pytest.raises(ValueError):
            ClusterNode(rankings=RankVector({"k": 1}), left=leaf("A", k=1), right=leaf("B", k=1))


class TestDistanceCache:
    """Tests for DistanceCache."""

    def test_pair_is_unordered(self):
        cache = DistanceCache()
        a, b = leaf("A", k=1), leaf("B", k=2)
        cache.put(a, b, 0.3)
        assert cache.get(b, a) == 0.3
        assert (b, a) in cache
        assert len(cache) == 1

    def test_missing_pair(self):
        cache = DistanceCache()
        assert cache.get(leaf("A", k=1), leaf("B", k=1)) is None

    def test_write_once(self):
        cache = DistanceCache()
        a, b = leaf("A", k=1), leaf("B", k=2)
        cache.put(a, b, 0.3)
        with pytest.raises(KeyError):
            cache.put(b, a, 0.4)

    def test_keyed_by_identity_not_content(self):
        cache = DistanceCache()
        a, b, twin = leaf("A", k=1), leaf("B", k=2), leaf("B", k=2)
        cache.put(a, b, 0.3)
        assert cache.get(a, twin) is None
