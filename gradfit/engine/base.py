# gradfit/engine/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from gradfit.engine.context import ExecutionContext
from gradfit.graph import ops
from gradfit.graph.autodiff import GradientPlan
from gradfit.graph.graph import ExprGraph
from gradfit.graph.node import Node
from gradfit.utils.errors import ExecutionError


class Machine(ABC):
    """
    Machine abstract base (Execution Engine layer):

    - evaluates a GradientPlan over an ExprGraph
    - run_all() = forward pass + backward pass
    - reset() drops every non-leaf value and gradient
    - subclasses only decide the evaluation ORDER; every kernel comes
      from gradfit.graph.ops so all strategies agree numerically
    """

    mode: str = ""

    def __init__(
        self,
        graph: ExprGraph,
        plan: GradientPlan,
        ctx: Optional[ExecutionContext] = None,
    ):
        self.graph = graph
        self.plan = plan
        self.ctx = ctx if ctx is not None else ExecutionContext()

        self._values: Dict[int, ops.Value] = {}
        self._grads: Dict[int, ops.Value] = {}
        self._closed = False

    # --------------------------------------------------
    # contract
    # --------------------------------------------------
    @abstractmethod
    def _forward(self) -> List[int]:
        """
        Fill self._values; return node indices in evaluation order.
        """
        raise NotImplementedError

    # --------------------------------------------------
    # public API
    # --------------------------------------------------
    def run_forward(self) -> None:
        self._guard()
        with np.errstate(all="ignore"):
            self._forward()
        self._check_output()

    def run_all(self) -> None:
        self._guard()
        with np.errstate(all="ignore"):
            evaluated = self._forward()
            self._check_output()
            if self.plan.wrt:
                self._backward(evaluated)

    def reset(self) -> None:
        self._values.clear()
        self._grads.clear()

    def value(self, node: Node) -> ops.Value:
        if node.index not in self._values:
            raise ExecutionError(f"node {node.name} has no value: run the machine first")
        return self._values[node.index]

    def gradients(self) -> Dict[int, float]:
        """
        Gradient map: parameter index -> d(output)/d(parameter).
        """
        missing = [i for i in self.plan.wrt if i not in self._grads]
        if missing:
            raise ExecutionError(f"no gradient for nodes {missing}: run the machine first")
        return {i: float(self._grads[i]) for i in self.plan.wrt}

    def close(self) -> None:
        self.reset()
        self._closed = True

    def __enter__(self) -> "Machine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --------------------------------------------------
    # shared helpers
    # --------------------------------------------------
    def _guard(self) -> None:
        if self._closed:
            raise ExecutionError(f"{self.__class__.__name__} is closed")
        self.ctx.check_thread()

    def _eval_node(self, index: int) -> None:
        node = self.graph.node(index)
        if node.is_leaf:
            self._values[index] = self.graph.leaf_value(index)
            return

        args = [self._values[o] for o in node.operands]
        out = ops.forward(node.op, args)
        if ops.has_nan(out):
            raise ExecutionError(f"forward pass produced NaN at {node.name}")
        self._values[index] = out

    def _backward(self, evaluated: Sequence[int]) -> None:
        needs = self.plan.needs_grad
        self._grads[self.plan.output] = 1.0

        for index in reversed(evaluated):
            g = self._grads.get(index)
            node = self.graph.node(index)
            if g is None or node.is_leaf:
                continue

            args = [self._values[o] for o in node.operands]
            shapes = _operand_shapes(self.graph, node)
            partials = ops.backward(node.op, args, self._values[index], g, shapes)

            for operand, partial in zip(node.operands, partials):
                if operand not in needs:
                    continue
                if operand in self._grads:
                    self._grads[operand] = self._grads[operand] + partial
                else:
                    self._grads[operand] = partial

        for index in self.plan.wrt:
            g = self._grads.get(index)
            if g is None or not ops.is_finite(g):
                raise ExecutionError(
                    f"backward pass produced invalid gradient for {self.graph.node(index).name}: {g}"
                )

    def _check_output(self) -> None:
        out = self._values.get(self.plan.output)
        if out is None:
            raise ExecutionError("forward pass did not reach the output node")
        if self.plan.wrt and not ops.is_finite(out):
            raise ExecutionError(f"cost is not finite: {out}")


def _operand_shapes(graph: ExprGraph, node: Node) -> Tuple[Tuple[int, ...], ...]:
    return tuple(graph.node(o).shape for o in node.operands)
