"""Top-level codefig configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .HighlightConfig import HighlightConfig
from .LogConfig import LogConfig

CONFIG_ENV_VAR = "CODEFIG_CONFIG"
DEFAULT_CONFIG_NAME = "codefig.json"


class CodefigConfig(BaseModel):
    """Top-level configuration for codefig."""

    model_config = ConfigDict(extra="forbid")

    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on CODEFIG_CONFIG or default to ./codefig.json."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser().resolve()
        return Path.cwd() / DEFAULT_CONFIG_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> "CodefigConfig":
        """Load and validate config from file.

        An explicit ``path`` must exist. Without one, the default location is
        used if present and built-in defaults otherwise.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            path = cls.get_config_path()
            if not path.exists():
                return cls()
        elif not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CodefigConfig":
        """Validate a config dict.

        Raises:
            ValueError: If validation fails
        """
        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert CodefigConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")
