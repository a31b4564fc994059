# gradfit/solvers/registry.py
from typing import Callable, Dict, List

from gradfit.config.fit_config import FitConfig
from gradfit.solvers.adagrad import AdaGradSolver
from gradfit.solvers.adam import AdamSolver
from gradfit.solvers.base import Solver
from gradfit.solvers.vanilla import VanillaSolver
from gradfit.utils.errors import ConfigurationError

_SOLVER_REGISTRY: Dict[str, Callable[[int, FitConfig], Solver]] = {
    "vanilla": lambda n, cfg: VanillaSolver(n, learning_rate=cfg.learning_rate),
    "adam": lambda n, cfg: AdamSolver(
        n,
        learning_rate=cfg.learning_rate,
        beta1=cfg.beta1,
        beta2=cfg.beta2,
        epsilon=cfg.epsilon,
    ),
    "adagrad": lambda n, cfg: AdaGradSolver(n, learning_rate=cfg.learning_rate, epsilon=cfg.epsilon),
}


def available_solvers() -> List[str]:
    return list(_SOLVER_REGISTRY)


def resolve_solver(name: str, *, n_params: int, cfg: FitConfig) -> Solver:
    if name not in _SOLVER_REGISTRY:
        available = ", ".join(_SOLVER_REGISTRY)
        raise ConfigurationError(f"No Solver for {name!r}. Available: {available}")

    return _SOLVER_REGISTRY[name](n_params, cfg)
