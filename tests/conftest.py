"""
Pytest configuration and fixtures for Grouper.
"""

import json
import logging
import os
from pathlib import Path

import pytest

# Keep runtime settings deterministic regardless of the developer's shell
os.environ["GROUPER_ENVIRONMENT"] = "test"
os.environ.pop("GROUPER_DEV_MODE", None)

from grouper.config import load_config
from grouper.services.clustering_service import HierarchicalClusteringService

MOVIES_PATH = Path(__file__).parent.parent / "examples" / "movies.json"


@pytest.fixture
def config():
    """Default configuration."""
    return load_config()


@pytest.fixture
def clustering_service(config):
    """Clustering service with the default Pearson metric."""
    return HierarchicalClusteringService(config)


@pytest.fixture
def three_entities():
    """A and B are nearly identical, C is anti-correlated with both."""
    return {
        "A": {"k1": 1.0, "k2": 2.0, "k3": 3.0},
        "B": {"k1": 1.0, "k2": 2.0, "k3": 3.1},
        "C": {"k1": 3.0, "k2": 2.0, "k3": 1.0},
    }


@pytest.fixture
def movies_path():
    """Path of the sample movie ratings file."""
    return MOVIES_PATH


@pytest.fixture
def movies():
    """Sample movie ratings (sparse: not every critic rated every movie)."""
    with open(MOVIES_PATH, encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture(autouse=True)
def reset_grouper_logger():
    """Drop handlers installed by setup_logging so they never outlive a test."""
    yield
    logger = logging.getLogger("grouper")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
