# gradfit/engine/__init__.py
from typing import Callable, Dict, Optional

from .base import Machine
from .context import ExecutionContext
from .interpreted import InterpretedMachine
from .tape import TapeMachine
from gradfit.graph.autodiff import GradientPlan
from gradfit.graph.graph import ExprGraph
from gradfit.utils.errors import ConfigurationError

_MACHINE_REGISTRY: Dict[str, Callable[..., Machine]] = {
    "tape": TapeMachine,
    "interpreted": InterpretedMachine,
}


def build_machine(
    mode: str,
    graph: ExprGraph,
    plan: GradientPlan,
    ctx: Optional[ExecutionContext] = None,
) -> Machine:
    if mode not in _MACHINE_REGISTRY:
        available = ", ".join(_MACHINE_REGISTRY)
        raise ConfigurationError(f"No Machine for mode {mode!r}. Available: {available}")
    return _MACHINE_REGISTRY[mode](graph, plan, ctx)


__all__ = [
    "Machine",
    "TapeMachine",
    "InterpretedMachine",
    "ExecutionContext",
    "build_machine",
]
