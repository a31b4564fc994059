# gradfit/solvers/base.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from gradfit.utils.errors import ConfigurationError, ExecutionError


class Solver(ABC):
    """
    Abstract Solver

    Contract:
    - step(values, grads) -> updated values (parameter order preserved)
    - per-parameter state is allocated once, in __init__, sized n_params
    - state persists across steps for the lifetime of one training run
    """

    name: str = ""

    def __init__(self, n_params: int, learning_rate: float = 0.1):
        if n_params <= 0:
            raise ConfigurationError(f"{self.name} solver needs at least one parameter, got {n_params}")
        if not math.isfinite(learning_rate) or learning_rate <= 0:
            raise ConfigurationError(
                f"{self.name} solver learning rate must be a positive finite float, got {learning_rate}"
            )
        self.n_params = n_params
        self.learning_rate = float(learning_rate)
        self.t = 0

    def step(self, values: np.ndarray, grads: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=np.float64)
        grads = np.asarray(grads, dtype=np.float64)
        expected = (self.n_params,)
        if values.shape != expected or grads.shape != expected:
            raise ExecutionError(
                f"{self.name} solver sized for {self.n_params} parameters, "
                f"got values{values.shape} grads{grads.shape}"
            )

        self.t += 1
        return self._update(values, grads)

    @abstractmethod
    def _update(self, values: np.ndarray, grads: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_params={self.n_params}, learning_rate={self.learning_rate})"
