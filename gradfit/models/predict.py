# gradfit/models/predict.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from gradfit.engine.tape import TapeMachine
from gradfit.graph.autodiff import forward_plan
from gradfit.graph.graph import ExprGraph
from gradfit.models.builders import MODEL_BUILDERS
from gradfit.models.inputs import validate_features


def _predict(task: str, thetas: Sequence[float], features: Sequence[Sequence[float]]) -> np.ndarray:
    columns = validate_features(features)

    graph = ExprGraph(name=f"{task}-predict")
    hypothesis = MODEL_BUILDERS[task](graph, columns, initial=thetas)

    with TapeMachine(graph, forward_plan(graph, hypothesis.output)) as machine:
        machine.run_forward()
        return np.array(machine.value(hypothesis.output), dtype=np.float64, copy=True)


def predict_linear(thetas: Sequence[float], features: Sequence[Sequence[float]]) -> np.ndarray:
    return _predict("linear", thetas, features)


def predict_logistic(thetas: Sequence[float], features: Sequence[Sequence[float]]) -> np.ndarray:
    return _predict("logistic", thetas, features)
