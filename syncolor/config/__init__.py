"""Configuration management for coloring runs."""

from syncolor.config.schema import (
    Config,
    ExperimentConfig,
    TopologyConfig,
    ColoringConfig,
    OutputConfig,
)
from syncolor.config.loader import load_config, save_config

__all__ = [
    "Config",
    "ExperimentConfig",
    "TopologyConfig",
    "ColoringConfig",
    "OutputConfig",
    "load_config",
    "save_config",
]
