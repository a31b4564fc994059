"""
Training

One fit call == one TrainingContext pushed through four steps:

    GraphBuildStep    features/target -> graph, thetas, hypothesis
    CostGradStep      hypothesis      -> mse cost, gradient plan
    MachineBuildStep  plan / config   -> machine (tape | interpreted), solver
    SolveStep         machine/solver  -> final thetas

Every failure is re-raised tagged with the step that produced it.
"""
from .context import TrainingContext
from .loop import solve
from .pipeline import TrainingPipeline, build_training_pipeline

__all__ = ["TrainingContext", "TrainingPipeline", "build_training_pipeline", "solve"]
