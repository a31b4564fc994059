# gradfit/models/builders.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from gradfit.graph.graph import ExprGraph
from gradfit.graph.node import Node
from gradfit.utils.errors import GraphConstructionError, ShapeError


@dataclass(frozen=True)
class Hypothesis:
    """
    thetas : [theta_0 (bias), theta_1, ..., theta_N], feature order
    output : hypothesis node, one value per sample
    """

    thetas: List[Node]
    output: Node


def _initial_thetas(n_features: int, initial: Optional[Sequence[float]]) -> List[float]:
    if initial is None:
        return [1.0] * (n_features + 1)
    initial = [float(v) for v in initial]
    if len(initial) != n_features + 1:
        raise ShapeError(f"expected {n_features + 1} parameters (bias + {n_features} features), got {len(initial)}")
    return initial


def _affine(graph: ExprGraph, columns: Sequence[np.ndarray], initial: Optional[Sequence[float]]):
    """
    theta_0 + theta_1*x_1 + ... + theta_N*x_N
    """
    init = _initial_thetas(len(columns), initial)

    thetas = [graph.parameter("theta_0", init[0])]
    acc = thetas[0]
    for i, column in enumerate(columns, start=1):
        x = graph.data(f"x_{i}", column)
        theta = graph.parameter(f"theta_{i}", init[i])
        thetas.append(theta)

        try:
            mul = graph.mul(x, theta)
        except GraphConstructionError as e:
            raise GraphConstructionError(f"x*theta multiplication error: {e.message}") from e
        try:
            acc = graph.add(acc, mul)
        except GraphConstructionError as e:
            raise GraphConstructionError(f"x*theta addition error: {e.message}") from e

    return thetas, acc


def build_linear(
    graph: ExprGraph,
    columns: Sequence[np.ndarray],
    initial: Optional[Sequence[float]] = None,
) -> Hypothesis:
    """
    hypothesis = theta_0 + Σ theta_i * x_i
    """
    thetas, output = _affine(graph, columns, initial)
    return Hypothesis(thetas=thetas, output=output)


def build_logistic(
    graph: ExprGraph,
    columns: Sequence[np.ndarray],
    initial: Optional[Sequence[float]] = None,
) -> Hypothesis:
    """
    hypothesis = 1 / (1 + exp(theta_0 + Σ theta_i * x_i))
    """
    thetas, z = _affine(graph, columns, initial)

    try:
        euler = graph.exp(z)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"euler exponent error: {e.message}") from e

    one = graph.constant(1.0, name="one")
    try:
        divisor = graph.add(one, euler)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"euler exponent addition error: {e.message}") from e
    try:
        output = graph.div(one, divisor)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"prediction division error: {e.message}") from e

    return Hypothesis(thetas=thetas, output=output)


MODEL_BUILDERS: Dict[str, Callable[..., Hypothesis]] = {
    "linear": build_linear,
    "logistic": build_logistic,
}
