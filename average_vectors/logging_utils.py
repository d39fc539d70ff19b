from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator


def _fmt_s(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    m = int(seconds // 60)
    s = seconds - 60 * m
    return f"{m}m{s:04.1f}s"


@contextmanager
def timed(logger: logging.Logger, label: str) -> Iterator[None]:
    t0 = time.perf_counter()
    logger.debug("START %s ...", label)
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        logger.debug("DONE %s (%s)", label, _fmt_s(dt))
