# gradfit/training/pipeline.py
from __future__ import annotations

from typing import List, Optional

from gradfit.observability.instrumentation import Instrumentation
from gradfit.pipeline.step import PipelineStep
from gradfit.training.context import TrainingContext
from gradfit.training.steps import CostGradStep, GraphBuildStep, MachineBuildStep, SolveStep
from gradfit.utils.logger import logs


class TrainingPipeline:
    """
    TrainingPipeline

    Semantics:
    - Pipeline owns step order
    - Steps execute semantics
    - A failing step aborts the run; later steps never execute
    """

    def __init__(self, *, steps: List[PipelineStep], inst: Instrumentation):
        self.steps = steps
        self.inst = inst

    def run(self, ctx: TrainingContext) -> TrainingContext:
        logs.info(f"[TrainingPipeline] START run_id={ctx.run_id} task={ctx.task}")

        try:
            for step in self.steps:
                ctx = step.run(ctx)
        finally:
            # a machine built by a step that never reached SolveStep
            if ctx.machine is not None:
                ctx.machine.close()

        self.inst.generate_timeline_report(ctx.run_id)
        logs.info(f"[TrainingPipeline] DONE run_id={ctx.run_id}")
        return ctx


def build_training_pipeline(inst: Optional[Instrumentation] = None) -> TrainingPipeline:
    inst = inst if inst is not None else Instrumentation()
    return TrainingPipeline(
        steps=[
            GraphBuildStep(inst),
            CostGradStep(inst),
            MachineBuildStep(inst),
            SolveStep(inst),
        ],
        inst=inst,
    )
