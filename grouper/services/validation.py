# grouper/services/validation.py
"""
Shape validation of decoded rating tables.
"""
import math
from typing import Any, Dict, Union

from pydantic import RootModel, StrictFloat, StrictInt, StrictStr, ValidationError, field_validator

from ..exceptions import InvalidInputError
from ..logging_config import get_logger

logger = get_logger('validation')

Rating = Union[StrictInt, StrictFloat]


class RatingTable(RootModel[Dict[StrictStr, Dict[StrictStr, Rating]]]):
    """
    Entity name -> feature key -> numeric rating.

    Values must be real numbers (bools and numeric strings are rejected),
    there must be at least one entity and every entity needs at least one
    rated feature.
    """

    @field_validator('root')
    @classmethod
    def check_shape(cls, table: Dict[str, Dict[str, Rating]]) -> Dict[str, Dict[str, Rating]]:
        """Reject empty tables, empty entities and non-finite ratings."""
        if not table:
            raise ValueError("rating table contains no entities")
        for name, ratings in table.items():
            if not ratings:
                raise ValueError(f"entity {name!r} has no ratings")
            for key, value in ratings.items():
                try:
                    finite = math.isfinite(value)
                except OverflowError:
                    raise ValueError(f"rating {name!r}/{key!r} is not representable as a float")
                if not finite:
                    raise ValueError(f"rating {name!r}/{key!r} is not a finite number")
        return table


def validate_rating_table(data: Any) -> Dict[str, Dict[str, float]]:
    """
    Validate decoded rating data and normalise every rating to float.

    Args:
        data: Mapping of entity name -> mapping of feature key -> number

    Returns:
        Plain dict copy of the data with float values, in input order

    Raises:
        InvalidInputError: If the data does not have the required shape
    """
    try:
        table = RatingTable.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected rating table: {e.error_count()} validation error(s)")
        raise InvalidInputError(f"Wrong data format: {e}") from e

    return {
        name: {key: float(value) for key, value in ratings.items()}
        for name, ratings in table.root.items()
    }
