from .builders import MODEL_BUILDERS, Hypothesis, build_linear, build_logistic
from .inputs import validate_features, validate_inputs
from .predict import predict_linear, predict_logistic

__all__ = [
    "Hypothesis",
    "MODEL_BUILDERS",
    "build_linear",
    "build_logistic",
    "validate_features",
    "validate_inputs",
    "predict_linear",
    "predict_logistic",
]
