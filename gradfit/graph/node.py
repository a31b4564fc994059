# gradfit/graph/node.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Op(str, Enum):
    # leaves
    PARAM = "param"
    DATA = "data"
    CONST = "const"

    # operations
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    EXP = "exp"
    SQUARE = "square"
    MEAN = "mean"


LEAF_OPS = frozenset({Op.PARAM, Op.DATA, Op.CONST})
BINARY_OPS = frozenset({Op.ADD, Op.SUB, Op.MUL, Op.DIV})
UNARY_OPS = frozenset({Op.EXP, Op.SQUARE, Op.MEAN})


@dataclass(frozen=True)
class Node:
    """
    One slot of the ExprGraph arena.

    operands are indices of nodes created earlier in the same graph,
    so `index` order is always a topological order.
    """

    index: int
    op: Op
    operands: Tuple[int, ...]
    shape: Tuple[int, ...]
    name: str

    @property
    def is_leaf(self) -> bool:
        return self.op in LEAF_OPS

    @property
    def is_scalar(self) -> bool:
        return self.shape == ()

    def __repr__(self) -> str:
        return f"Node({self.index}, {self.op.value}, {self.name!r}, shape={self.shape})"
