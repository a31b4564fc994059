# gradfit/training/steps/machine_build_step.py
from __future__ import annotations

from gradfit.engine import build_machine
from gradfit.pipeline.step import PipelineStep
from gradfit.solvers.registry import resolve_solver
from gradfit.training.context import TrainingContext
from gradfit.utils.logger import logs


class MachineBuildStep(PipelineStep):
    """
    Contract:
    - consumes ctx.plan / ctx.cfg
    - produces ctx.machine and ctx.solver (state sized to len(ctx.thetas))
    """

    def execute(self, ctx: TrainingContext) -> TrainingContext:
        cfg = ctx.cfg
        solver_name = cfg.resolved_solver(ctx.task)

        ctx.machine = build_machine(cfg.execution_mode, ctx.graph, ctx.plan, ctx.exec_ctx)
        ctx.solver = resolve_solver(solver_name, n_params=len(ctx.thetas), cfg=cfg)

        logs.info(
            f"[{self.step_name}] run={ctx.run_id} mode={cfg.execution_mode} "
            f"solver={ctx.solver!r} nodes={len(ctx.graph)}"
        )
        return ctx
