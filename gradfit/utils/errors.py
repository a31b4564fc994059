# gradfit/utils/errors.py
from __future__ import annotations

from typing import Optional


class GradfitError(RuntimeError):
    """
    Base error for every failure raised by a fit call.

    `stage` names the pipeline step that failed; when set the message is
    rendered as ``[stage] message``.
    """

    def __init__(self, message: str, *, stage: Optional[str] = None):
        self.message = message
        self.stage = stage
        super().__init__(f"[{stage}] {message}" if stage else message)

    def with_stage(self, stage: str) -> "GradfitError":
        if self.stage is not None:
            return self
        return type(self)(self.message, stage=stage)


class ConfigurationError(GradfitError):
    """
    Invalid option (unknown solver, bad learning rate, unknown key).
    Raised before any graph is built. Should NOT print traceback.
    """


class ShapeError(GradfitError):
    """Feature / target vectors that cannot form a model."""


class GraphConstructionError(GradfitError):
    """An expression node cannot be formed from its operands."""


class ExecutionError(GradfitError):
    """Forward / backward evaluation or a solver step failed at runtime."""


class DataLoadError(GradfitError):
    """CSV file missing, header absent or a cell is not a float."""
