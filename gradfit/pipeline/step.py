# gradfit/pipeline/step.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gradfit.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from gradfit.utils.errors import ExecutionError, GradfitError


class PipelineStep(ABC):
    """
    Pipeline Step base

    - one step == one stage of a fit call
    - subclasses must implement execute(ctx)
    - run(ctx) times the stage and tags every failure with the step name
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def run(self, ctx: Any) -> Any:
        try:
            with self.inst.timer(self.step_name):
                return self.execute(ctx)
        except GradfitError as e:
            tagged = e.with_stage(self.step_name)
            if tagged is e:
                raise
            raise tagged from e
        except (ArithmeticError, ValueError, TypeError) as e:
            raise ExecutionError(f"{type(e).__name__}: {e}", stage=self.step_name) from e

    @abstractmethod
    def execute(self, ctx: Any) -> Any:
        raise NotImplementedError
