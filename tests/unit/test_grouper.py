"""
Unit tests for the Grouper facade.
"""

import json
from unittest.mock import MagicMock

import pytest

from grouper import Grouper, InvalidInputError


class TestGrouper:
    """Tests for Grouper."""

    def test_accepts_json_text(self, three_entities):
        grouper = Grouper(json.dumps(three_entities))
        assert sorted(grouper.cluster_tree.all_names()) == ["A", "B", "C"]

    def test_accepts_mapping(self, three_entities):
        grouper = Grouper(three_entities)
        assert len(grouper.distances) == 3

    def test_clusters_are_level_partition(self, three_entities):
        grouper = Grouper(three_entities)
        assert len(grouper.clusters) == 3
        assert len(grouper.clusters[0]) == 3
        assert len(grouper.clusters[-1]) == 1

    def test_results_are_cached(self, three_entities):
        grouper = Grouper(three_entities)
        assert grouper.cluster_tree is grouper.cluster_tree
        assert grouper.clusters is grouper.clusters

    def test_uses_injected_service(self, three_entities):
        service = MagicMock()
        grouper = Grouper(three_entities, service=service)

        grouper.cluster_tree

        service.build.assert_called_once_with(grouper.data)

    def test_invalid_json_rejected(self):
        with pytest.raises(InvalidInputError):
            Grouper("{oops")

    def test_invalid_mapping_rejected(self):
        with pytest.raises(InvalidInputError):
            Grouper({"A": {}})
