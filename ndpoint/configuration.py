"""Tools related to ndpoint configuration"""

import logging
from pathlib import Path
from typing import Literal, Mapping

from expression import Result
import yaml

from ndpoint.exceptions import ConfigurationValueError
from ndpoint.point import DimensionMismatchPolicy
from ndpoint.utilities import unsafe_extract_result

__author__ = "ndpoint developers"

__all__ = [
    "DIMENSION_MISMATCH_POLICY_KEY",
    "get_dimension_mismatch_policy",
    "read_configuration_file",
    "read_dimension_mismatch_policy",
]


DIMENSION_MISMATCH_POLICY_KEY: Literal["dimensionMismatchPolicy"] = "dimensionMismatchPolicy"


def read_dimension_mismatch_policy(config_file: str | Path) -> DimensionMismatchPolicy:
    """Read the given configuration file, and parse the policy to pass to the named elementwise operations."""
    try:
        conf_data = read_configuration_file(config_file)
    except (OSError, yaml.YAMLError):
        logging.error("Failed to read ndpoint configuration file: %s", config_file)
        raise
    policy = unsafe_extract_result(get_dimension_mismatch_policy(conf_data))
    logging.info("Configured dimension mismatch policy: %s", policy.name)
    return policy


def get_dimension_mismatch_policy(conf_data: Mapping[str, object]) -> Result[DimensionMismatchPolicy, ConfigurationValueError]:
    """Get the policy for elementwise operations on points of unequal dimensionality, defaulting to strict."""
    match conf_data.get(DIMENSION_MISMATCH_POLICY_KEY):
        case None:
            return Result.Ok(DimensionMismatchPolicy.STRICT)
        case str(raw_policy):
            return DimensionMismatchPolicy.parse(raw_policy)\
                .to_result(f"Unknown value for {DIMENSION_MISMATCH_POLICY_KEY}: {raw_policy}")\
                .map_error(ConfigurationValueError)
        case unexpected:
            return Result.Error(ConfigurationValueError(
                f"Value for {DIMENSION_MISMATCH_POLICY_KEY} isn't text, but {type(unexpected).__name__}"
            ))


def read_configuration_file(config_file: str | Path) -> Mapping[str, object]:
    """Parse the ndpoint configuration file from YAML."""
    logging.info("Reading ndpoint configuration file: %s", config_file)
    with open(config_file, "r") as fh:
        conf_data = yaml.safe_load(fh)
    if conf_data is None:
        return {}
    if not isinstance(conf_data, Mapping):
        raise ConfigurationValueError(f"Configuration data isn't a mapping, but {type(conf_data).__name__}")
    return conf_data
