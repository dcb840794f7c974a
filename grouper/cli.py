# grouper/cli.py
"""
Command line interface.

Usage:
    grouper examples/movies.json
    grouper examples/movies.json --levels --csv distances.csv
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import GrouperConfig, load_config
from .exceptions import GrouperError
from .grouper import Grouper
from .logging_config import setup_logging, get_logger
from .services.clustering_service import HierarchicalClusteringService
from .services.export_service import ExportService
from .services.ingestion_service import IngestionService
from .settings import get_settings

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='grouper',
        description='Hierarchical clustering of entities by rating correlation'
    )
    parser.add_argument('data_file', help='JSON file: {entity: {feature: rating}}')
    parser.add_argument('--tree', action='store_true', help='Print the cluster tree')
    parser.add_argument('--levels', action='store_true',
                        help='Print the clusters grouped by affinity')
    parser.add_argument('--distances', action='store_true',
                        help='Print the distance between every pair of entities')
    parser.add_argument('--csv', metavar='PATH', help='Write pairwise distances to a CSV file')
    parser.add_argument('--config', metavar='PATH', help='JSON config overrides')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default from GROUPER_LOG_LEVEL)')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {GrouperConfig().app_version}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = args.log_level or ('DEBUG' if settings.is_development else settings.log_level)
    setup_logging(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        log_file=settings.log_file,
        use_colors=settings.use_colors,
    )

    show_all = not (args.tree or args.levels or args.distances)

    try:
        config = load_config(args.config or settings.config_path)
        data = IngestionService().load_file(args.data_file)
        grouper = Grouper(data, service=HierarchicalClusteringService(config))
        exporter = ExportService(config)

        if show_all or args.levels:
            print("Clusters grouped by affinity:")
            print(exporter.format_levels(grouper.clusters))
            print()
        if show_all or args.tree:
            print("Cluster tree:")
            print(exporter.render_tree(grouper.cluster_tree))
            print()
        if show_all or args.distances:
            print("Distances between every pair of entities:")
            precision = config.export.float_precision
            for (name_a, name_b), distance in grouper.distances.items():
                print(f"{name_a} <-> {name_b}: {distance:.{precision}f}")
            print()
        if args.csv:
            exporter.distances_to_csv(grouper.distances, args.csv)
    except GrouperError as e:
        logger.error(f"FAILED: {e}")
        print(f"grouper: error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
