"""Run configuration system with frozen, hashable, serializable dataclasses."""

from intermediacy.config.defaults import DEFAULT_SAMPLING
from intermediacy.config.experiment import (
    ConfigurationError,
    RunConfig,
    SamplingConfig,
    validate_sampling_parameters,
)
from intermediacy.config.hashing import config_hash, estimate_config_hash
from intermediacy.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_json,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_SAMPLING",
    "RunConfig",
    "SamplingConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_json",
    "estimate_config_hash",
    "validate_sampling_parameters",
]
