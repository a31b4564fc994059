from .instrumentation import Instrumentation, NoOpInstrumentation
from .metrics import MetricRecorder
from .progress import ProgressReporter

__all__ = ["Instrumentation", "NoOpInstrumentation", "MetricRecorder", "ProgressReporter"]
