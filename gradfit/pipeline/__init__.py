from .step import PipelineStep

__all__ = ["PipelineStep"]
