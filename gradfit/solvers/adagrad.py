# gradfit/solvers/adagrad.py
from __future__ import annotations

import numpy as np

from gradfit.solvers.base import Solver


class AdaGradSolver(Solver):
    """
    Per-parameter adaptive rate: the squared-gradient history of each
    parameter shrinks its own step.
    """

    name = "adagrad"

    def __init__(self, n_params: int, learning_rate: float = 0.1, epsilon: float = 1e-8):
        super().__init__(n_params, learning_rate)
        self.epsilon = epsilon
        self.cache = np.zeros(n_params, dtype=np.float64)

    def _update(self, values: np.ndarray, grads: np.ndarray) -> np.ndarray:
        self.cache += grads ** 2
        return values - self.learning_rate * grads / np.sqrt(self.cache + self.epsilon)
