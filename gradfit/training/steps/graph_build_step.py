# gradfit/training/steps/graph_build_step.py
from __future__ import annotations

from gradfit.graph.graph import ExprGraph
from gradfit.models.builders import MODEL_BUILDERS
from gradfit.models.inputs import validate_inputs
from gradfit.pipeline.step import PipelineStep
from gradfit.training.context import TrainingContext
from gradfit.utils.errors import ConfigurationError


class GraphBuildStep(PipelineStep):
    """
    Contract:
    - consumes ctx.features / ctx.target
    - validates shapes BEFORE any node exists
    - produces ctx.graph / ctx.thetas / ctx.hypothesis / ctx.target_node
    """

    def execute(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.task not in MODEL_BUILDERS:
            available = ", ".join(MODEL_BUILDERS)
            raise ConfigurationError(f"No model builder for {ctx.task!r}. Available: {available}")

        columns, y = validate_inputs(ctx.features, ctx.target)

        graph = ExprGraph(name=f"{ctx.task}-{ctx.run_id}")
        target_node = graph.data("y", y)
        hypothesis = MODEL_BUILDERS[ctx.task](graph, columns)

        ctx.columns = columns
        ctx.graph = graph
        ctx.target_node = target_node
        ctx.thetas = hypothesis.thetas
        ctx.hypothesis = hypothesis.output
        return ctx
