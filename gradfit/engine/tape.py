# gradfit/engine/tape.py
from __future__ import annotations

from typing import List, Optional

from gradfit.engine.base import Machine
from gradfit.engine.context import ExecutionContext
from gradfit.graph.autodiff import GradientPlan
from gradfit.graph.graph import ExprGraph


class TapeMachine(Machine):
    """
    Batch tape execution.

    The plan is compiled once into a flat tape (leaf loads first, then
    operations in topological order). Every run replays the same tape.
    """

    mode = "tape"

    def __init__(
        self,
        graph: ExprGraph,
        plan: GradientPlan,
        ctx: Optional[ExecutionContext] = None,
    ):
        super().__init__(graph, plan, ctx)
        self._leaves: List[int] = []
        self._tape: List[int] = []
        for index in plan.order:
            if graph.node(index).is_leaf:
                self._leaves.append(index)
            else:
                self._tape.append(index)
        self._program = self._leaves + self._tape

    @property
    def program(self) -> List[int]:
        return list(self._program)

    def _forward(self) -> List[int]:
        for index in self._program:
            self._eval_node(index)
        return self._program
