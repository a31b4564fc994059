#!filepath: gradfit/config/app_config.py
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .fit_config import FitConfig, _describe
from .log_config import LogConfig
from gradfit.utils.errors import ConfigurationError


def default_config_path() -> Path:
    """
    Bundled defaults: gradfit/config/base.yml
    """
    return Path(__file__).resolve().parent / "base.yml"


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    fit: FitConfig = Field(default_factory=FitConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to the bundled base.yml
        - .env is read from the current working directory
        - GRADFIT_LOG_LEVEL overrides log.level
        """
        load_dotenv(Path.cwd() / ".env")

        if path is None:
            path = str(default_config_path())

        if not os.path.exists(path):
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must hold a mapping")

        level = os.getenv("GRADFIT_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigurationError(f"invalid config {path}: {_describe(e)}") from e
