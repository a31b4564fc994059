from .app_config import AppConfig
from .fit_config import FitConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "FitConfig", "LogConfig"]
