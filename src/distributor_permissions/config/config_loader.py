"""Run configuration loader with Pydantic v2 validation.

Loads and validates a ``distributor_perms.yaml`` file into a typed
:class:`RunConfig` object. Unknown keys are allowed so the file can carry
extra metadata.

Example
-------
::

    config = ConfigLoader().load(Path("distributor_perms.yaml"))
    config.locations_path
"""
from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator


class RunConfig(BaseModel):
    """Top-level configuration for one evaluation run.

    All fields are optional. An empty ``distributors`` list means the
    built-in distributors are evaluated.
    """

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    locations_path: Path | None = Field(default=None)
    skip_header: bool = Field(default=True)
    max_workers: int | None = Field(default=None, ge=1)
    output_format: Literal["text", "table", "json"] = Field(default="text")
    distributors: list[dict[str, object]] = Field(default_factory=list)

    @field_validator("distributors")
    @classmethod
    def validate_distributor_names(
        cls, values: list[dict[str, object]]
    ) -> list[dict[str, object]]:
        for index, entry in enumerate(values):
            if not str(entry.get("name", "")).strip():
                raise ValueError(f"Distributor at index {index} has no name.")
        return values


class ConfigLoader:
    """Loads and validates run configuration YAML."""

    def load(self, config_path: Path) -> RunConfig:
        """Load and validate a run configuration file.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Run config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return RunConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> RunConfig:
        """Load and validate a YAML string directly."""
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return RunConfig.model_validate(raw)

    def defaults(self) -> RunConfig:
        """Return a configuration with all defaults applied."""
        return RunConfig()
