# gradfit/graph/autodiff.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Sequence, Tuple

from gradfit.graph.graph import ExprGraph
from gradfit.graph.node import Node, Op
from gradfit.utils.errors import GraphConstructionError


@dataclass(frozen=True)
class GradientPlan:
    """
    Reverse-mode plan for one output node.

    order      : reachable node indices, topological
    wrt        : parameter indices whose gradients are requested
    needs_grad : nodes on a path between a `wrt` leaf and the output
    """

    output: int
    order: Tuple[int, ...]
    wrt: Tuple[int, ...]
    needs_grad: FrozenSet[int]


def mse_cost(graph: ExprGraph, hypothesis: Node, target: Node) -> Node:
    """
    cost = mean((hypothesis - target)^2)
    """
    try:
        diff = graph.sub(hypothesis, target)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"failed to get diff: {e.message}") from e
    try:
        se = graph.square(diff)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"failed to get se: {e.message}") from e
    try:
        return graph.mean(se)
    except GraphConstructionError as e:
        raise GraphConstructionError(f"failed to get cost: {e.message}") from e


def grad(graph: ExprGraph, cost: Node, wrt: Sequence[Node]) -> GradientPlan:
    if not graph.owns(cost):
        raise GraphConstructionError(f"cost node {cost.name} does not belong to graph {graph.name}")
    if not cost.is_scalar:
        raise GraphConstructionError(f"cost must be a scalar, got shape {cost.shape}")

    plan = forward_plan(graph, cost)
    reachable = set(plan.order)

    for node in wrt:
        if not graph.owns(node):
            raise GraphConstructionError(f"node {node.name} does not belong to graph {graph.name}")
        if node.op is not Op.PARAM:
            raise GraphConstructionError(f"cannot differentiate with respect to {node.name}: not a parameter")
        if node.index not in reachable:
            raise GraphConstructionError(f"parameter {node.name} does not contribute to {cost.name}")

    wrt_idx = tuple(n.index for n in wrt)
    needs = set(wrt_idx)
    for index in plan.order:
        if any(o in needs for o in graph.node(index).operands):
            needs.add(index)

    return GradientPlan(
        output=cost.index,
        order=plan.order,
        wrt=wrt_idx,
        needs_grad=frozenset(needs),
    )


def forward_plan(graph: ExprGraph, output: Node) -> GradientPlan:
    """
    Plan with no gradients requested (prediction only).
    """
    if not graph.owns(output):
        raise GraphConstructionError(f"node {output.name} does not belong to graph {graph.name}")

    reachable = {output.index}
    # operands always precede their consumer
    for index in range(output.index, -1, -1):
        if index in reachable:
            reachable.update(graph.node(index).operands)

    return GradientPlan(
        output=output.index,
        order=tuple(sorted(reachable)),
        wrt=(),
        needs_grad=frozenset(),
    )
