# gradfit/training/steps/cost_grad_step.py
from __future__ import annotations

from gradfit.graph.autodiff import grad, mse_cost
from gradfit.pipeline.step import PipelineStep
from gradfit.training.context import TrainingContext


class CostGradStep(PipelineStep):
    """
    Contract:
    - consumes ctx.hypothesis / ctx.target_node / ctx.thetas
    - produces ctx.cost (mean squared error) and ctx.plan
    """

    def execute(self, ctx: TrainingContext) -> TrainingContext:
        ctx.cost = mse_cost(ctx.graph, ctx.hypothesis, ctx.target_node)
        ctx.plan = grad(ctx.graph, ctx.cost, ctx.thetas)
        return ctx
