from .adagrad import AdaGradSolver
from .adam import AdamSolver
from .base import Solver
from .registry import available_solvers, resolve_solver
from .vanilla import VanillaSolver

__all__ = [
    "Solver",
    "VanillaSolver",
    "AdamSolver",
    "AdaGradSolver",
    "resolve_solver",
    "available_solvers",
]
