"""
engine.py

Average parallel elements across equal-length vectors.

Undefined means (no inputs, or every weight zero) are reported as NaN in the
output rather than raised. Inputs are trusted: lengths and weights are not
checked.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike

from average_vectors.config import DTypeLike, resolve_output_dtype

logger = logging.getLogger(__name__)


def fill_undefined(out: np.ndarray) -> np.ndarray:
    out.fill(np.nan)
    return out


def _prepare_output(n: int, out: Optional[np.ndarray], dtype: DTypeLike) -> np.ndarray:
    if out is None:
        return np.empty(n, dtype=resolve_output_dtype(dtype))
    return out


def _compute(
    n: int,
    inputs: Sequence[ArrayLike],
    weights: Optional[np.ndarray],
    out: np.ndarray,
    skip_nan: bool,
    weighted: bool,
) -> np.ndarray:
    if len(inputs) == 0:
        logger.debug("No input arrays; %d output value(s) left undefined.", n)
        return fill_undefined(out)
    if len(inputs) == 1:
        if weighted and weights[0] == 0:
            logger.debug("Single input array has zero weight; output left undefined.")
            return fill_undefined(out)
        out[:] = inputs[0]
        return out

    out[:] = 0
    accumulated = np.zeros(n, dtype=np.float64) if skip_nan else None

    for k, current in enumerate(inputs):
        current = np.asarray(current)
        weight = 1
        if weighted:
            weight = weights[k]
            if weight == 0:
                continue
            # weight of 1 takes the plain path below without the multiplication
            if weight != 1:
                current = current * weight

        if skip_nan:
            keep = ~np.isnan(current)
            out[keep] += current[keep]
            accumulated[keep] += weight
        else:
            np.add(out, current, out=out, casting="unsafe")

    with np.errstate(divide="ignore", invalid="ignore"):
        if skip_nan:
            # positions without any valid contribution end up as 0/0
            np.divide(out, accumulated, out=out, casting="unsafe")
        else:
            if weighted:
                total = np.sum(weights[: len(inputs)], dtype=np.float64)
            else:
                total = np.float64(len(inputs))
            np.multiply(out, np.float64(1.0) / total, out=out, casting="unsafe")
    return out


def compute(
    n: int,
    inputs: Sequence[ArrayLike],
    out: Optional[np.ndarray] = None,
    *,
    skip_nan: bool = False,
    dtype: DTypeLike = np.float64,
) -> np.ndarray:
    """
    Average parallel elements across multiple arrays.

    Each element of the result is the mean of the corresponding elements of
    every array in ``inputs`` (all of length ``n``). The result is written
    into ``out`` when given, otherwise into a new array of ``dtype``; either
    way the filled array is returned.

    With ``skip_nan``, NaNs are ignored per element at some cost in speed.
    A position where every input is NaN is undefined (typically NaN).
    An integer ``out`` receives truncated means, but cannot hold the NaN
    written for an empty input set.
    """
    inputs = list(inputs)
    out = _prepare_output(n, out, dtype)
    return _compute(n, inputs, None, out, skip_nan, weighted=False)


def compute_weighted(
    n: int,
    inputs: Sequence[ArrayLike],
    weights: ArrayLike,
    out: Optional[np.ndarray] = None,
    *,
    skip_nan: bool = False,
    dtype: DTypeLike = np.float64,
) -> np.ndarray:
    """
    Weighted average of parallel elements across multiple arrays.

    ``weights`` holds one non-negative, finite weight per array in ``inputs``.
    A zero weight drops that array entirely, including from the NaN-skipping
    denominator. If every weight is equal the plain average is used, or the
    output is all NaN when that shared weight is zero.
    """
    inputs = list(inputs)
    weights = np.asarray(weights)
    out = _prepare_output(n, out, dtype)

    if inputs:
        first = weights[0]
        if np.all(weights[: len(inputs)] == first):
            if first == 0:
                logger.debug("All %d weight(s) are zero; output left undefined.", len(inputs))
                return fill_undefined(out)
            return _compute(n, inputs, None, out, skip_nan, weighted=False)

    return _compute(n, inputs, weights, out, skip_nan, weighted=True)
