# gradfit/solvers/vanilla.py
from __future__ import annotations

import numpy as np

from gradfit.solvers.base import Solver


class VanillaSolver(Solver):
    """
    θ ← θ − rate · grad
    """

    name = "vanilla"

    def _update(self, values: np.ndarray, grads: np.ndarray) -> np.ndarray:
        return values - self.learning_rate * grads
