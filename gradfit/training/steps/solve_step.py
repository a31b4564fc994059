# gradfit/training/steps/solve_step.py
from __future__ import annotations

from gradfit.pipeline.step import PipelineStep
from gradfit.training.context import TrainingContext
from gradfit.training.loop import solve


class SolveStep(PipelineStep):
    """
    Contract:
    - consumes ctx.machine / ctx.solver / ctx.thetas
    - produces ctx.params in [bias, feature_1, ...] order
    - closes ctx.machine on every exit path
    """

    def execute(self, ctx: TrainingContext) -> TrainingContext:
        with ctx.machine:
            ctx.params = solve(ctx, self.inst)
        return ctx
