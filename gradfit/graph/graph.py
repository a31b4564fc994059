# gradfit/graph/graph.py
from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from gradfit.graph.node import BINARY_OPS, Node, Op
from gradfit.utils.errors import GraphConstructionError

LeafValue = Union[float, np.ndarray]


class ExprGraph:
    """
    Arena of expression nodes addressed by index.

    - leaves (parameter / data / constant) own their bound value
    - operations only reference operands that already exist
    - data leaves are read-only; only parameter leaves can be re-bound
    """

    def __init__(self, name: str = "graph"):
        self.name = name
        self._nodes: List[Node] = []
        self._leaf_values: Dict[int, LeafValue] = {}

    # --------------------------------------------------
    # arena access
    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def node(self, index: int) -> Node:
        return self._nodes[index]

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    def parameters(self) -> List[Node]:
        return [n for n in self._nodes if n.op is Op.PARAM]

    def owns(self, node: Node) -> bool:
        return 0 <= node.index < len(self._nodes) and self._nodes[node.index] is node

    # --------------------------------------------------
    # leaves
    # --------------------------------------------------
    def parameter(self, name: str, value: float = 1.0) -> Node:
        value = float(value)
        if not math.isfinite(value):
            raise GraphConstructionError(f"parameter {name} initial value is not finite: {value}")
        node = self._append(Op.PARAM, (), (), name)
        self._leaf_values[node.index] = value
        return node

    def data(self, name: str, values: Sequence[float]) -> Node:
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1:
            raise GraphConstructionError(f"data leaf {name} must be a vector, got shape {arr.shape}")
        arr.setflags(write=False)
        node = self._append(Op.DATA, (), arr.shape, name)
        self._leaf_values[node.index] = arr
        return node

    def constant(self, value: float, name: Optional[str] = None) -> Node:
        node = self._append(Op.CONST, (), (), name or f"const_{value}")
        self._leaf_values[node.index] = float(value)
        return node

    def leaf_value(self, node: Union[Node, int]) -> LeafValue:
        index = node if isinstance(node, int) else node.index
        if index not in self._leaf_values:
            raise GraphConstructionError(f"node {index} is not a leaf")
        return self._leaf_values[index]

    def bind(self, node: Node, value: float) -> None:
        """
        Re-bind a parameter leaf (the only mutable leaf kind).
        """
        self._check_owned(node)
        if node.op is not Op.PARAM:
            raise GraphConstructionError(f"cannot bind {node.name}: only parameter leaves are mutable")
        self._leaf_values[node.index] = float(value)

    # --------------------------------------------------
    # operations
    # --------------------------------------------------
    def add(self, a: Node, b: Node) -> Node:
        return self._binary(Op.ADD, a, b)

    def sub(self, a: Node, b: Node) -> Node:
        return self._binary(Op.SUB, a, b)

    def mul(self, a: Node, b: Node) -> Node:
        return self._binary(Op.MUL, a, b)

    def div(self, a: Node, b: Node) -> Node:
        return self._binary(Op.DIV, a, b)

    def exp(self, a: Node) -> Node:
        self._check_owned(a)
        return self._append(Op.EXP, (a.index,), a.shape, f"exp({a.name})")

    def square(self, a: Node) -> Node:
        self._check_owned(a)
        return self._append(Op.SQUARE, (a.index,), a.shape, f"square({a.name})")

    def mean(self, a: Node) -> Node:
        self._check_owned(a)
        if a.shape == () or a.shape[0] == 0:
            raise GraphConstructionError(f"mean needs a non-empty vector, got {a.name} shape={a.shape}")
        return self._append(Op.MEAN, (a.index,), (), f"mean({a.name})")

    # --------------------------------------------------
    # internals
    # --------------------------------------------------
    def _binary(self, op: Op, a: Node, b: Node) -> Node:
        assert op in BINARY_OPS
        self._check_owned(a)
        self._check_owned(b)
        shape = _broadcast_shape(a, b, op)
        return self._append(op, (a.index, b.index), shape, f"{op.value}({a.name},{b.name})")

    def _append(self, op: Op, operands: Tuple[int, ...], shape: Tuple[int, ...], name: str) -> Node:
        node = Node(index=len(self._nodes), op=op, operands=operands, shape=shape, name=name)
        self._nodes.append(node)
        return node

    def _check_owned(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise GraphConstructionError(f"operand must be a Node, got {type(node).__name__}")
        if not self.owns(node):
            raise GraphConstructionError(f"node {node.name} does not belong to graph {self.name}")


def _broadcast_shape(a: Node, b: Node, op: Op) -> Tuple[int, ...]:
    if a.shape == b.shape:
        return a.shape
    if a.shape == ():
        return b.shape
    if b.shape == ():
        return a.shape
    raise GraphConstructionError(
        f"shape mismatch in {op.value}: {a.name}{a.shape} vs {b.name}{b.shape}"
    )
