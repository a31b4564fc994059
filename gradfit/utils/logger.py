#!filepath: gradfit/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    Library logger
    ---------------------------------------
    - stderr sink by default
    - dated file sink with rotation / retention when log_dir is set
    - function level catch decorator (timing + exception logging)
    - configure=False leaves loguru sinks untouched (library import)
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
        configure: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if configure:
            if self.log_dir is not None:
                os.makedirs(self.log_dir, exist_ok=True)
            self._configure()

    def _configure(self) -> None:
        """
        Replace every loguru sink with the one described by this instance.
        """

        logger.remove()

        if self.log_dir is None:
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )
            return

        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorators ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(f"[CALL] {func.__name__} args={args!r}, kwargs={kwargs!r}")

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"[ERROR] {func.__name__}: {msg}: {e}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# shared library logs: writes through whatever sinks the host installed,
# init_logging() is the only place gradfit replaces them
logs = Logging(configure=False)


def init_logging(cfg) -> Logging:
    """
    Reconfigure the shared `logs` sink from a LogConfig.
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    if logs.log_dir is not None:
        os.makedirs(logs.log_dir, exist_ok=True)
    logs._configure()
    return logs
