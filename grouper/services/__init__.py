# Services module for Grouper
from .distance_service import PearsonCorrelationDistance
from .validation import RatingTable, validate_rating_table
from .ingestion_service import IngestionService
from .clustering_service import HierarchicalClusteringService
from .export_service import ExportService

__all__ = [
    'PearsonCorrelationDistance',
    'RatingTable',
    'validate_rating_table',
    'IngestionService',
    'HierarchicalClusteringService',
    'ExportService'
]
