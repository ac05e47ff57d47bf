"""Minimal configuration system using Pydantic + OmegaConf."""

from __future__ import annotations

import math
from typing import Optional

from omegaconf import OmegaConf
from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Main configuration class."""

    model_config = ConfigDict(extra="forbid")

    # Distribution parameters
    mu: float = Field(default=0.0, ge=-math.pi, le=math.pi)
    kappa: float = Field(default=1.0, ge=0)
    num_samples: int = Field(default=1000, ge=1)

    # Random source
    backend: str = Field(default="numpy", pattern="^(numpy|torch)$")
    device: str = "cpu"
    seed: Optional[int] = Field(default=42, ge=0)

    # Output
    output_dir: str = "generated_samples/"

    # Logging
    verbosity: str = Field(default="info", pattern="^(debug|info|warning|error|critical)$")

    # Wandb
    wandb_project: Optional[str] = None
    wandb_offline: bool = False

    @classmethod
    def load(cls, config_path: Optional[str] = None, **overrides) -> Config:
        """
        Load config from file, merging over the model defaults.

        Parameters
        ----------
        config_path : str or None
            YAML file with any subset of the fields.
        **overrides
            Field values applied last, e.g. from the command line. ``None``
            values are skipped.
        """
        merged_config = OmegaConf.create(cls().model_dump())

        if config_path:
            user_config = OmegaConf.load(config_path)
            merged_config = OmegaConf.merge(merged_config, user_config)

        cli_config = {key: value for key, value in overrides.items() if value is not None}
        if cli_config:
            merged_config = OmegaConf.merge(merged_config, OmegaConf.create(cli_config))

        return cls(**OmegaConf.to_container(merged_config, resolve=True))

    def to_dict(self) -> dict:
        return self.model_dump()
