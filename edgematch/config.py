"""
Configuration management for edge matching.

Loads YAML configuration with sensible defaults for sampling and tolerances.
"""

import os
from dataclasses import dataclass, field

import yaml

from .curve import intersect
from .curve import spline
from .errors import InvalidInputError
from .point import EPSILON


@dataclass
class SplineConfig:
    """Configuration for sampling edges from their control points."""
    steps_per_segment: int = spline.STEPS_PER_SEGMENT
    alpha: float = spline.ALPHA  # 0.5 centripetal, 0 uniform, 1 chordal


@dataclass
class IntersectionConfig:
    """Configuration for crossing detection."""
    tolerance: float = intersect.TOLERANCE


@dataclass
class MatchConfig:
    """Complete edge matching configuration."""
    spline: SplineConfig = field(default_factory=SplineConfig)
    intersection: IntersectionConfig = field(default_factory=IntersectionConfig)
    epsilon: float = EPSILON


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values.
    """
    config = MatchConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _to_int(value):
    """Convert a whole number, such as 20 or 20.0, to int."""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f'{value!r} is not a whole number')
    return int(number)


# converters for every recognized key, by section
_FIELD_TYPES = {
    "spline": {"steps_per_segment": _to_int, "alpha": float},
    "intersection": {"tolerance": float},
}


def _convert(key, value, convert):
    """Convert a YAML value, raising InvalidInputError naming the key on failure."""
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f'invalid value for config key "{key}": {value!r}') from e


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass."""
    if not isinstance(yaml_data, dict):
        raise InvalidInputError(f'config file must contain a mapping, not {yaml_data!r}')
    for section, field_types in _FIELD_TYPES.items():
        # an empty section ("spline:") loads as None
        section_data = yaml_data.get(section) or {}
        if not isinstance(section_data, dict):
            raise InvalidInputError(f'config section "{section}" must be a mapping, not {section_data!r}')
        section_config = getattr(config, section)
        for key, value in section_data.items():
            if key in field_types:
                setattr(section_config, key, _convert(f"{section}.{key}", value, field_types[key]))

    if yaml_data.get("epsilon") is not None:
        config.epsilon = _convert("epsilon", yaml_data["epsilon"], float)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = MatchConfig()

    yaml_data = {
        "spline": {
            "steps_per_segment": config.spline.steps_per_segment,
            "alpha": config.spline.alpha,
        },
        "intersection": {
            "tolerance": config.intersection.tolerance,
        },
        "epsilon": config.epsilon,
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
