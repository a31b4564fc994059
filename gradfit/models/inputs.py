# gradfit/models/inputs.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from gradfit.utils.errors import ShapeError


def validate_features(features: Sequence[Sequence[float]]) -> List[np.ndarray]:
    """
    Columns -> float64 vectors of one common, non-zero length.
    """
    if features is None or len(features) == 0:
        raise ShapeError("feature list is empty: at least one feature column is required")

    columns: List[np.ndarray] = []
    for i, column in enumerate(features, start=1):
        try:
            arr = np.asarray(column, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ShapeError(f"feature x_{i} is not numeric: {e}") from e
        if arr.ndim != 1:
            raise ShapeError(f"feature x_{i} must be one-dimensional, got shape {arr.shape}")
        if arr.shape[0] == 0:
            raise ShapeError(f"feature x_{i} is empty")
        if not np.all(np.isfinite(arr)):
            raise ShapeError(f"feature x_{i} contains non-finite values")
        columns.append(arr)

    n = columns[0].shape[0]
    for i, arr in enumerate(columns, start=1):
        if arr.shape[0] != n:
            raise ShapeError(f"feature x_{i} has {arr.shape[0]} values, x_1 has {n}")
    return columns


def validate_inputs(
    features: Sequence[Sequence[float]],
    target: Optional[Sequence[float]],
) -> Tuple[List[np.ndarray], np.ndarray]:
    columns = validate_features(features)

    if target is None:
        raise ShapeError("target vector is missing")
    try:
        y = np.asarray(target, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"target is not numeric: {e}") from e
    if y.ndim != 1:
        raise ShapeError(f"target must be one-dimensional, got shape {y.shape}")
    if not np.all(np.isfinite(y)):
        raise ShapeError("target contains non-finite values")

    n = columns[0].shape[0]
    if y.shape[0] != n:
        raise ShapeError(f"target has {y.shape[0]} values, features have {n}")
    return columns, y
