# gradfit/graph/ops.py
"""
Primitive kernels shared by every execution strategy.

forward(op, args)            -> value
backward(op, args, out, g)   -> one gradient per operand, reduced to the
                                operand's own shape
"""
from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from gradfit.graph.node import Op

Value = Union[float, np.ndarray]


def forward(op: Op, args: Sequence[Value]) -> Value:
    if op is Op.ADD:
        return args[0] + args[1]
    if op is Op.SUB:
        return args[0] - args[1]
    if op is Op.MUL:
        return args[0] * args[1]
    if op is Op.DIV:
        return args[0] / args[1]
    if op is Op.EXP:
        return np.exp(args[0])
    if op is Op.SQUARE:
        return np.square(args[0])
    if op is Op.MEAN:
        return float(np.mean(args[0]))
    raise ValueError(f"no forward kernel for {op}")


def backward(
    op: Op,
    args: Sequence[Value],
    out: Value,
    g: Value,
    shapes: Sequence[Tuple[int, ...]],
) -> Tuple[Value, ...]:
    if op is Op.ADD:
        grads = (g, g)
    elif op is Op.SUB:
        grads = (g, -g)
    elif op is Op.MUL:
        grads = (g * args[1], g * args[0])
    elif op is Op.DIV:
        a, b = args
        # (a / b) / b: b * b overflows long before the true partial does
        grads = (g / b, -g * (a / b) / b)
    elif op is Op.EXP:
        # a saturated link (out = inf) receives g = 0, and 0 * inf must stay 0
        grads = (np.where(g == 0, 0.0, g * out),)
    elif op is Op.SQUARE:
        grads = (2.0 * args[0] * g,)
    elif op is Op.MEAN:
        (shape,) = shapes
        size = int(np.prod(shape)) if shape else 1
        grads = (np.full(shape, g / size),)
    else:
        raise ValueError(f"no backward kernel for {op}")

    return tuple(_unbroadcast(gr, shape) for gr, shape in zip(grads, shapes))


def _unbroadcast(grad: Value, shape: Tuple[int, ...]) -> Value:
    # scalar operand broadcast against a vector
    if shape == ():
        return float(np.sum(grad))
    return grad


def has_nan(value: Value) -> bool:
    return bool(np.any(np.isnan(value)))


def is_finite(value: Value) -> bool:
    return bool(np.all(np.isfinite(value)))
