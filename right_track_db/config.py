"""Agency configuration — env vars, YAML files, defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


class AgencyDatabaseConfig(BaseSettings):
    location: str = ""

    model_config = {"env_prefix": "RT_AGENCY_DB_"}


class AgencyConfig(BaseSettings):
    """Configuration properties of a single Right Track agency."""

    id: str = ""
    db: AgencyDatabaseConfig = Field(default_factory=AgencyDatabaseConfig)

    model_config = {"env_prefix": "RT_AGENCY_"}

    @classmethod
    def from_yaml(cls, path: Path) -> AgencyConfig:
        """Load config from a YAML file; env vars fill fields the file leaves unset."""
        values = load_agency_config(path)
        if isinstance(values.get("db"), dict):
            values["db"] = AgencyDatabaseConfig(**values["db"])
        return cls(**values)


class AgencyLike(Protocol):
    def get_config(self) -> Any: ...


class RightTrackAgency:
    """A Right Track agency and its configuration properties."""

    def __init__(self, config: AgencyConfig | None = None):
        self._config = config

    def get_config(self) -> AgencyConfig | None:
        return self._config

    @classmethod
    def from_yaml(cls, path: Path) -> RightTrackAgency:
        return cls(AgencyConfig.from_yaml(path))


def load_agency_config(path: Path) -> dict[str, Any]:
    """Load an agency YAML config file, or an empty mapping if it is missing."""
    path = Path(path)
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}
