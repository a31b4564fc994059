# gradfit/api.py
from __future__ import annotations

import uuid
from typing import Any, List, Mapping, Optional, Sequence, Union

from gradfit.config.fit_config import FitConfig
from gradfit.engine.context import ExecutionContext
from gradfit.observability.instrumentation import Instrumentation
from gradfit.training.context import TrainingContext
from gradfit.training.pipeline import build_training_pipeline
from gradfit.utils.logger import logs

Options = Union[FitConfig, Mapping[str, Any], None]


def _fit(
    task: str,
    features: Sequence[Sequence[float]],
    target: Sequence[float],
    options: Options,
) -> List[float]:
    # configuration errors surface before any graph exists
    cfg = FitConfig.from_options(options)

    ctx = TrainingContext(
        run_id=uuid.uuid4().hex[:8],
        task=task,
        cfg=cfg,
        features=features,
        target=target,
        exec_ctx=ExecutionContext(accelerated=cfg.accelerated),
    )

    pipeline = build_training_pipeline(Instrumentation())
    ctx = pipeline.run(ctx)
    return list(ctx.params)


@logs.catch(msg="linear regression failed")
def fit_linear(
    features: Sequence[Sequence[float]],
    target: Sequence[float],
    options: Optional[Options] = None,
) -> List[float]:
    """
    Fit  y = θ0 + θ1*x1 + ... + θN*xN

    Returns [θ0, θ1, ..., θN] in feature order. Default solver: adam.
    """
    return _fit("linear", features, target, options)


@logs.catch(msg="logistic regression failed")
def fit_logistic(
    features: Sequence[Sequence[float]],
    target: Sequence[float],
    options: Optional[Options] = None,
) -> List[float]:
    """
    Fit  p = 1 / (1 + e^(θ0 + θ1*x1 + ... + θN*xN))

    Returns [θ0, θ1, ..., θN] in feature order. Default solver: vanilla.
    """
    return _fit("logistic", features, target, options)
