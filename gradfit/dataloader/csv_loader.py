#!filepath: gradfit/dataloader/csv_loader.py
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import pandas as pd

from gradfit.utils.errors import DataLoadError
from gradfit.utils.logger import logs


def read_csv(
    path: str | Path,
    x_headers: Sequence[str],
    y_header: str,
) -> Tuple[List[List[float]], List[float]]:
    """
    Read feature columns + one target column from a headed CSV.

    Returns
    -------
    xs : one list per x_header, in x_headers order
    y  : target column
    """
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"could not open file {path}")

    try:
        # keep raw strings: every cell is parsed (and rejected) explicitly below
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataLoadError(f"could not read file {path} as csv: {e}") from e

    missing = [h for h in [*x_headers, y_header] if h not in df.columns]
    if missing:
        raise DataLoadError(f"could not find header: {', '.join(missing)}")

    xs = [_float_column(df, h) for h in x_headers]
    y = _float_column(df, y_header)

    logs.debug(f"[read_csv] {path.name}: rows={len(y)} features={list(x_headers)} target={y_header}")
    return xs, y


def _float_column(df: pd.DataFrame, name: str) -> List[float]:
    raw = df[name].str.strip()
    values = pd.to_numeric(raw, errors="coerce")

    bad = values.isna()
    if bad.any():
        record = raw[bad].iloc[0]
        raise DataLoadError(f"could not parse record as float {record!r} in column {name}")

    return values.astype(float).tolist()
