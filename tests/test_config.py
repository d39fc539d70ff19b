import numpy as np
import pytest

from average_vectors.config import (
    AveragingOptions,
    options_from_mapping,
    parse_bool,
    resolve_output_dtype,
)


def test_resolve_output_dtype():
    assert resolve_output_dtype(None) == np.float64
    assert resolve_output_dtype("float32") == np.float32
    assert resolve_output_dtype(np.float64) == np.float64
    assert resolve_output_dtype(float) == np.float64


@pytest.mark.parametrize("bad", ["int64", int, np.bool_, "not_a_dtype"])
def test_resolve_output_dtype_rejects_non_floating(bad):
    with pytest.raises(ValueError):
        resolve_output_dtype(bad)


def test_parse_bool():
    assert parse_bool(True, name="x") is True
    assert parse_bool(" Yes ", name="x") is True
    assert parse_bool("off", name="x") is False
    assert parse_bool(0, name="x") is False
    with pytest.raises(ValueError, match="skip_nan"):
        parse_bool("maybe", name="skip_nan")


def test_options_from_mapping():
    opts = options_from_mapping({"skip_nan": "true", "dtype": "float32"})
    assert opts == AveragingOptions(skip_nan=True, dtype=np.dtype(np.float32))
    assert options_from_mapping(None) == AveragingOptions()
    assert options_from_mapping({}).dtype == np.float64


def test_options_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError, match="weights"):
        options_from_mapping({"weights": [1, 2]})
