#!/usr/bin/env python3
"""
Demo: cluster the sample movie ratings and print every result.

Usage:
    python scripts/cluster_movies.py
    python scripts/cluster_movies.py --data path/to/ratings.json
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from grouper import Grouper, ExportService
from grouper.logging_config import setup_logging, get_logger

setup_logging()
logger = get_logger('demo')


def main():
    parser = argparse.ArgumentParser(description='Cluster sample movie ratings')
    parser.add_argument('--data', default=str(project_root / 'examples' / 'movies.json'),
                        help='Rating table in JSON format')
    args = parser.parse_args()

    logger.info(f"Clustering {args.data}")
    grouper = Grouper(Path(args.data).read_text(encoding='utf-8'))
    exporter = ExportService()

    print()
    print("Printing the list of clusters grouped by affinity:")
    print()
    print(exporter.format_levels(grouper.clusters))

    print()
    print("Printing the cluster tree:")
    print()
    print(exporter.render_tree(grouper.cluster_tree))

    print()
    print("Printing the distances between every pair of nodes:")
    print()
    print(exporter.distances_dataframe(grouper.distances).to_string(index=False))


if __name__ == '__main__':
    main()
