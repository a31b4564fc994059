# gradfit/solvers/adam.py
from __future__ import annotations

import numpy as np

from gradfit.solvers.base import Solver


class AdamSolver(Solver):
    """
    Adaptive-moment solver.

    m ← β1·m + (1−β1)·g
    v ← β2·v + (1−β2)·g²
    θ ← θ − rate · m̂ / (√v̂ + ε), with m̂, v̂ bias corrected by step count
    """

    name = "adam"

    def __init__(
        self,
        n_params: int,
        learning_rate: float = 0.1,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ):
        super().__init__(n_params, learning_rate)
        self.beta1 = beta1
        self.beta2 = beta2
        self.epsilon = epsilon

        self.m = np.zeros(n_params, dtype=np.float64)
        self.v = np.zeros(n_params, dtype=np.float64)

    def _update(self, values: np.ndarray, grads: np.ndarray) -> np.ndarray:
        self.m[:] = self.beta1 * self.m + (1 - self.beta1) * grads
        self.v[:] = self.beta2 * self.v + (1 - self.beta2) * (grads ** 2)

        m_hat = self.m / (1 - self.beta1 ** self.t)
        v_hat = self.v / (1 - self.beta2 ** self.t)

        return values - self.learning_rate * m_hat / (np.sqrt(v_hat) + self.epsilon)
