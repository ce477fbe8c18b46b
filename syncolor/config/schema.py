"""Configuration schema using Pydantic."""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, ConfigDict, Field


class ExperimentConfig(BaseModel):
    """Run-level configuration."""
    name: str = Field(default="coloring", description="Run name")
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility (None for fresh entropy)"
    )
    max_rounds: Optional[int] = Field(
        default=None,
        description="Round guard; None uses the algorithm's default bound"
    )
    check_invariants: bool = Field(default=True, description="Verify invariants every round")
    verbose: bool = Field(default=False, description="Enable verbose logging")


class TopologyConfig(BaseModel):
    """Graph topology configuration."""
    type: Literal["complete", "chain", "hydrocarbon"] = Field(
        description="Topology type"
    )
    num_nodes: int = Field(description="Number of vertices in the graph")


class ColoringConfig(BaseModel):
    """Coloring algorithm configuration."""
    algorithm: Literal["randomized", "halving"] = Field(
        default="randomized",
        description="Coloring algorithm"
    )
    params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Algorithm-specific parameters (e.g. palette_size)"
    )


class OutputConfig(BaseModel):
    """Result export configuration."""
    path: Optional[str] = Field(
        default=None,
        description="Export file (.dot/.gv, .json, .yaml); None disables export"
    )


class Config(BaseModel):
    """Main configuration object."""
    model_config = ConfigDict(extra="forbid")  # Raise error on unknown fields

    experiment: ExperimentConfig = Field(default_factory=ExperimentConfig)
    topology: TopologyConfig
    coloring: ColoringConfig = Field(default_factory=ColoringConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
