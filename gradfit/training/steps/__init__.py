from .cost_grad_step import CostGradStep
from .graph_build_step import GraphBuildStep
from .machine_build_step import MachineBuildStep
from .solve_step import SolveStep

__all__ = ["GraphBuildStep", "CostGradStep", "MachineBuildStep", "SolveStep"]
