# grouper/config.py
"""
Central configuration for Grouper.
Uses dataclasses for type-safe configuration management.
"""
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Optional
import json

from .exceptions import InvalidInputError

# Distance reported when a correlation is undefined (no variance, or no
# shared feature keys). Treated as maximal similarity.
FALLBACK_DISTANCE = 0.0


@dataclass
class ClusteringConfig:
    """Configuration for the agglomerative clustering run."""
    fallback_distance: float = FALLBACK_DISTANCE


@dataclass
class ExportConfig:
    """Configuration for rendering and exporting results."""
    float_precision: int = 6
    csv_delimiter: str = ','
    tree_indent: str = '  '


@dataclass
class GrouperConfig:
    """Main application configuration combining all sub-configs."""
    clustering: ClusteringConfig = field(default_factory=ClusteringConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    app_title: str = "Grouper"
    app_version: str = "1.0.0"


def load_config(config_path: Optional[str] = None) -> GrouperConfig:
    """
    Load configuration from file or return defaults.

    The file is a JSON object whose keys are section names
    (``clustering``, ``export``) mapping to field overrides, e.g.
    ``{"export": {"float_precision": 3}}``.

    Args:
        config_path: Optional path to JSON config file

    Returns:
        GrouperConfig instance with loaded or default values

    Raises:
        InvalidInputError: If the file is not valid JSON or names an
            unknown section or field, or a value of the wrong type
    """
    config = GrouperConfig()
    if config_path is None:
        return config

    try:
        with open(config_path, encoding='utf-8') as fh:
            overrides = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidInputError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(overrides, dict):
        raise InvalidInputError("Config file must contain a JSON object")

    for section_name, values in overrides.items():
        section = getattr(config, section_name, None)
        if not is_dataclass(section) or not isinstance(values, dict):
            raise InvalidInputError(f"Unknown config section: {section_name}")
        known = {f.name for f in fields(section)}
        for key, value in values.items():
            if key not in known:
                raise InvalidInputError(f"Unknown config field: {section_name}.{key}")
            setattr(section, key, _coerce(section_name, key, value, getattr(section, key)))

    return config


def _coerce(section_name: str, key: str, value, default):
    """Check an override against the type of the field's default."""
    expected = type(default)
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    # bool is an int subclass but never a valid number here
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise InvalidInputError(
            f"Config field {section_name}.{key} must be of type {expected.__name__}"
        )
    return value
