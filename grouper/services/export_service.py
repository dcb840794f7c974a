# grouper/services/export_service.py
"""
Service for rendering and exporting clustering results.
"""
from typing import Dict, List, Optional, Tuple
from pathlib import Path

import pandas as pd

from ..config import GrouperConfig, load_config
from ..domain.cluster import ClusterNode
from ..logging_config import get_logger

logger = get_logger('export_service')

DISTANCE_COLUMNS = ['entity_a', 'entity_b', 'distance']


class ExportService:
    """
    Turns merge trees, level partitions and distance maps into text,
    DataFrames and CSV.
    """

    def __init__(self, config: Optional[GrouperConfig] = None):
        """
        Initialize the export service.

        Args:
            config: Application configuration (defaults if omitted)
        """
        self.config = config or load_config()

    def render_tree(self, tree: ClusterNode) -> str:
        """
        Render the merge tree as indented text.

        Every line starts with the node's depth in parentheses. Internal
        nodes show their merge distance and list the right subtree before
        the left one.

        Example:
            (0) + 0.9412
              (1) + 0.0000
                (2) B
                (2) A
              (1) C
        """
        lines: List[str] = []
        self._render_node(tree, 0, lines)
        return "\n".join(lines)

    def _render_node(self, node: ClusterNode, depth: int, lines: List[str]) -> None:
        indent = self.config.export.tree_indent * depth
        if node.is_leaf():
            lines.append(f"{indent}({depth}) {node.name}")
            return

        precision = self.config.export.float_precision
        lines.append(f"{indent}({depth}) + {node.distance:.{precision}f}")
        self._render_node(node.right, depth + 1, lines)
        self._render_node(node.left, depth + 1, lines)

    def format_levels(self, levels: List[List[List[str]]]) -> str:
        """
        Render a level partition, one line per affinity level.

        Args:
            levels: Output of HierarchicalClusteringService.level_partition

        Returns:
            Text such as ``affinity 0: [A] [B] [C]``
        """
        lines = []
        for index, groups in enumerate(levels):
            rendered = " ".join(f"[{', '.join(group)}]" for group in groups)
            lines.append(f"affinity {index}: {rendered}")
        return "\n".join(lines)

    def distances_dataframe(self, distances: Dict[Tuple[str, str], float]) -> pd.DataFrame:
        """
        Build a DataFrame with one row per entity pair.

        Args:
            distances: Output of HierarchicalClusteringService.distance_matrix

        Returns:
            DataFrame with columns entity_a, entity_b, distance
        """
        rows = [
            {'entity_a': name_a, 'entity_b': name_b, 'distance': distance}
            for (name_a, name_b), distance in distances.items()
        ]
        return pd.DataFrame(rows, columns=DISTANCE_COLUMNS)

    def distances_to_csv(
        self,
        distances: Dict[Tuple[str, str], float],
        path: Optional[Path] = None
    ) -> str:
        """
        Export the pairwise distances as CSV.

        Args:
            distances: Output of HierarchicalClusteringService.distance_matrix
            path: Optional file to write the CSV to

        Returns:
            The CSV text
        """
        df = self.distances_dataframe(distances)
        csv_text = df.to_csv(
            index=False,
            sep=self.config.export.csv_delimiter,
            float_format=f"%.{self.config.export.float_precision}f",
        )

        if path is not None:
            Path(path).write_text(csv_text, encoding='utf-8')
            logger.info(f"Wrote {len(df)} distances to {path}")

        return csv_text
