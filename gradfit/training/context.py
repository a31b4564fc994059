# gradfit/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from gradfit.config.fit_config import FitConfig
from gradfit.engine.base import Machine
from gradfit.engine.context import ExecutionContext
from gradfit.graph.autodiff import GradientPlan
from gradfit.graph.graph import ExprGraph
from gradfit.graph.node import Node
from gradfit.solvers.base import Solver


@dataclass
class TrainingContext:
    """
    TrainingContext

    Semantics:
    - One context == one fit call
    - Owns its graph, parameter leaves and solver state; nothing is shared
      between contexts
    """

    # -------------------------
    # Identity
    # -------------------------
    run_id: str
    task: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: FitConfig
    features: Sequence[Sequence[float]]
    target: Sequence[float]
    exec_ctx: ExecutionContext = field(default_factory=ExecutionContext)

    # -------------------------
    # Built by steps
    # -------------------------
    columns: Optional[List[np.ndarray]] = None
    graph: Optional[ExprGraph] = None
    thetas: List[Node] = field(default_factory=list)
    hypothesis: Optional[Node] = None
    target_node: Optional[Node] = None
    cost: Optional[Node] = None
    plan: Optional[GradientPlan] = None
    machine: Optional[Machine] = None
    solver: Optional[Solver] = None

    # -------------------------
    # Result
    # -------------------------
    params: Optional[List[float]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
