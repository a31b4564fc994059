from .autodiff import GradientPlan, forward_plan, grad, mse_cost
from .graph import ExprGraph
from .node import Node, Op

__all__ = ["ExprGraph", "Node", "Op", "GradientPlan", "grad", "mse_cost", "forward_plan"]
