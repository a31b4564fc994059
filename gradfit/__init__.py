#!filepath: gradfit/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs, init_logging
from .utils.errors import (
    GradfitError,
    ConfigurationError,
    ShapeError,
    GraphConstructionError,
    ExecutionError,
    DataLoadError,
)
from .config import AppConfig, FitConfig, LogConfig
from .api import fit_linear, fit_logistic
from .models.predict import predict_linear, predict_logistic
from .dataloader.csv_loader import read_csv

__all__ = [
    "logs", "Logging", "init_logging",
    "fit_linear", "fit_logistic",
    "predict_linear", "predict_logistic",
    "read_csv",
    "AppConfig", "FitConfig", "LogConfig",
    "GradfitError", "ConfigurationError", "ShapeError",
    "GraphConstructionError", "ExecutionError", "DataLoadError",
]
