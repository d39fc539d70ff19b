import logging

from average_vectors.logging_utils import _fmt_s, timed


def test_fmt_s():
    assert _fmt_s(0.0125) == "12.5ms"
    assert _fmt_s(5.5) == "5.5s"
    assert _fmt_s(125.0) == "2m05.0s"


def test_timed_logs_start_and_done(caplog):
    logger = logging.getLogger("average_vectors.test")
    with caplog.at_level(logging.DEBUG, logger="average_vectors.test"):
        with timed(logger, "unit"):
            pass
    assert "START unit ..." in caplog.text
    assert "DONE unit" in caplog.text


def test_timed_logs_done_on_error(caplog):
    logger = logging.getLogger("average_vectors.test")
    with caplog.at_level(logging.DEBUG, logger="average_vectors.test"):
        try:
            with timed(logger, "failing"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
    assert "DONE failing" in caplog.text
