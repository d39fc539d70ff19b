"""Averaging option helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import numpy as np

DTypeLike = Union[str, type, np.dtype, None]

_TRUE_STRINGS = {"true", "yes", "1", "on"}
_FALSE_STRINGS = {"false", "no", "0", "off"}


def resolve_output_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Normalise a dtype spec to a floating numpy dtype.
    None maps to float64. Integer or object outputs cannot hold NaN and are rejected.
    """
    if dtype is None:
        return np.dtype(np.float64)
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"Unsupported output dtype: {dtype!r}.") from exc
    if not np.issubdtype(resolved, np.floating):
        raise ValueError(f"Output dtype must be floating point, got {resolved}.")
    return resolved


def parse_bool(value: Union[str, bool, int, np.bool_], *, name: str) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        raw = value.strip().lower()
        if raw in _TRUE_STRINGS:
            return True
        if raw in _FALSE_STRINGS:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}.")


@dataclass(frozen=True)
class AveragingOptions:
    skip_nan: bool = False
    dtype: np.dtype = field(default_factory=lambda: np.dtype(np.float64))

    def __post_init__(self) -> None:
        object.__setattr__(self, "dtype", resolve_output_dtype(self.dtype))


def options_from_mapping(mapping: Optional[Mapping[str, Any]]) -> AveragingOptions:
    if not mapping:
        return AveragingOptions()
    unknown = sorted(set(mapping) - {"skip_nan", "dtype"})
    if unknown:
        raise ValueError(f"Unknown averaging option(s): {', '.join(unknown)}.")
    skip_nan = parse_bool(mapping.get("skip_nan", False), name="skip_nan")
    return AveragingOptions(skip_nan=skip_nan, dtype=mapping.get("dtype"))
