# gradfit/engine/interpreted.py
from __future__ import annotations

from typing import List, Optional

import numpy as np

from gradfit.engine.base import Machine
from gradfit.engine.context import ExecutionContext
from gradfit.graph.autodiff import GradientPlan
from gradfit.graph.graph import ExprGraph
from gradfit.utils.logger import logs


class InterpretedMachine(Machine):
    """
    Graph-interpreted execution.

    Nothing is compiled: each run walks the graph from the output node,
    evaluating operands on demand (memoised within the run). With
    watch=True every evaluated node is logged at DEBUG level.
    """

    mode = "interpreted"

    def __init__(
        self,
        graph: ExprGraph,
        plan: GradientPlan,
        ctx: Optional[ExecutionContext] = None,
        watch: bool = False,
    ):
        super().__init__(graph, plan, ctx)
        self.watch = watch

    def _forward(self) -> List[int]:
        evaluated: List[int] = []
        visited = set()
        # iterative post-order walk; deep graphs must not hit the recursion limit
        stack = [(self.plan.output, False)]

        while stack:
            index, expanded = stack.pop()
            if expanded:
                self._eval_node(index)
                evaluated.append(index)
                if self.watch:
                    self._watch(index)
                continue

            if index in visited:
                continue
            visited.add(index)

            stack.append((index, True))
            for operand in reversed(self.graph.node(index).operands):
                if operand not in visited:
                    stack.append((operand, False))

        return evaluated

    def _watch(self, index: int) -> None:
        node = self.graph.node(index)
        value = self._values[index]
        if np.ndim(value) == 0:
            logs.debug(f"[Interpreted] {node.name} = {float(value):.6g}")
        else:
            logs.debug(f"[Interpreted] {node.name} shape={np.shape(value)} mean={float(np.mean(value)):.6g}")
