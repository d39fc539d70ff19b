"""
combine.py

Combine per-batch summary vectors into an overall summary.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from average_vectors.config import AveragingOptions
from average_vectors.engine import compute, compute_weighted
from average_vectors.logging_utils import timed

logger = logging.getLogger(__name__)


def _combine(
    n: int,
    rows: List[np.ndarray],
    sizes: Optional[ArrayLike],
    skip_nan: Optional[bool],
    options: Optional[AveragingOptions],
) -> np.ndarray:
    opts = options or AveragingOptions()
    if skip_nan is None:
        skip_nan = opts.skip_nan

    mode = "unweighted" if sizes is None else "weighted"
    logger.debug(
        "Combining %d batch(es) of length %d (%s, skip_nan=%s)",
        len(rows),
        n,
        mode,
        skip_nan,
    )
    with timed(logger, f"combine {mode} batches"):
        if sizes is None:
            return compute(n, rows, skip_nan=skip_nan, dtype=opts.dtype)
        return compute_weighted(
            n,
            rows,
            np.asarray(sizes, dtype=float),
            skip_nan=skip_nan,
            dtype=opts.dtype,
        )


def combine_batch_means(
    means: Union[np.ndarray, Sequence[ArrayLike]],
    sizes: Optional[ArrayLike] = None,
    *,
    skip_nan: Optional[bool] = None,
    options: Optional[AveragingOptions] = None,
) -> np.ndarray:
    """
    Average per-batch mean vectors, weighting each batch by its size if given.

    ``means`` is a sequence of equal-length vectors or a 2D array with one row
    per batch. ``skip_nan`` overrides ``options.skip_nan`` when set.
    """
    if isinstance(means, np.ndarray) and means.ndim == 2:
        n = means.shape[1]
        rows = list(means)
    else:
        rows = [np.asarray(m) for m in means]
        n = len(rows[0]) if rows else 0
    return _combine(n, rows, sizes, skip_nan, options)


def combine_frame(
    frame: pd.DataFrame,
    weights: Union[str, ArrayLike, None] = None,
    *,
    skip_nan: Optional[bool] = None,
    options: Optional[AveragingOptions] = None,
) -> pd.Series:
    """
    Average the rows of a per-batch statistics table.

    ``weights`` is either the name of a column holding batch weights (it is
    excluded from the averaged columns) or one weight per row.
    """
    stats = frame
    if isinstance(weights, str):
        if weights not in frame.columns:
            raise ValueError(f"Weight column '{weights}' not found in DataFrame.")
        sizes = frame[weights].to_numpy(dtype=float)
        stats = frame.drop(columns=[weights])
    elif weights is not None:
        sizes = np.asarray(weights, dtype=float)
    else:
        sizes = None

    values = stats.to_numpy(dtype=float)
    result = _combine(values.shape[1], list(values), sizes, skip_nan, options)
    return pd.Series(result, index=stats.columns, name="mean")
