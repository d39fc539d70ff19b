"""Element-wise (weighted, NaN-aware) averaging across equal-length vectors."""

from average_vectors.combine import combine_batch_means, combine_frame
from average_vectors.config import AveragingOptions, options_from_mapping
from average_vectors.engine import compute, compute_weighted, fill_undefined

__all__ = [
    "compute",
    "compute_weighted",
    "fill_undefined",
    "combine_batch_means",
    "combine_frame",
    "AveragingOptions",
    "options_from_mapping",
]
