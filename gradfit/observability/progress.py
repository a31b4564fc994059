#!filepath: gradfit/observability/progress.py
from typing import Optional

from gradfit.utils.logger import logs


class ProgressReporter:
    """
    Iteration progress for the solve loop (log lines only, no TTY widgets).
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def start(self, task: str, total: int):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started total={total} iterations")

    def update(self, task: str, current: int, total: int, cost: Optional[float] = None):
        if not self.enabled:
            return
        suffix = f" cost={cost:.6g}" if cost is not None else ""
        logs.info(f"[Progress] {task}: {current}/{total}{suffix}")

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
