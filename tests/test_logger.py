import io
import logging

from chromepdf.utils.logger import get_logger


def test_single_handler_and_level_update():
    logger = get_logger("chromepdf.test_level", level=logging.INFO)
    again = get_logger("chromepdf.test_level", level=logging.DEBUG)

    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_writes_formatted_records_to_stream():
    stream = io.StringIO()
    logger = get_logger("chromepdf.test_stream", stream=stream)

    logger.info("converted %d pages", 3)

    line = stream.getvalue()
    assert "INFO - chromepdf.test_stream: converted 3 pages" in line
    assert line.startswith("[")
