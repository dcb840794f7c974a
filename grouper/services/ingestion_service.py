# grouper/services/ingestion_service.py
"""
Service for loading serialized rating tables (JSON).
"""
from pathlib import Path
from typing import Dict, Union
import json

from ..exceptions import InvalidInputError
from ..logging_config import get_logger
from .validation import validate_rating_table

logger = get_logger('ingestion_service')


class IngestionService:
    """
    Decodes rating tables and hands back validated in-memory data.

    Expected format: a JSON object mapping entity names to objects of
    feature key -> number, e.g. ``{"Movie 1": {"Critic A": 4.5}}``.
    """

    def parse_json(self, payload: Union[str, bytes]) -> Dict[str, Dict[str, float]]:
        """
        Decode and validate a JSON rating table.

        Args:
            payload: JSON text or UTF-8 encoded bytes

        Returns:
            Validated mapping of entity -> feature -> float

        Raises:
            InvalidInputError: If the payload cannot be decoded or has the
                wrong shape
        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Could not decode rating table: {e}")
            raise InvalidInputError(f"Wrong data format: {e}") from e

        table = validate_rating_table(data)
        logger.info(f"Loaded rating table with {len(table)} entities")
        return table

    def load_file(self, path: Union[str, Path]) -> Dict[str, Dict[str, float]]:
        """
        Read and parse a JSON rating table from disk.

        Args:
            path: Location of the JSON file

        Returns:
            Validated mapping of entity -> feature -> float

        Raises:
            InvalidInputError: If the file cannot be read or parsed
        """
        logger.info(f"Loading rating table: {path}")
        try:
            payload = Path(path).read_bytes()
        except OSError as e:
            raise InvalidInputError(f"Cannot read rating table {path}: {e}") from e
        return self.parse_json(payload)
