import io
import threading

import pytest

from lanternhttp.logger import Level, Logger, get_logger


@pytest.fixture
def output():
    logger = get_logger()
    saved = (logger.stream, logger.min_level, logger.console_output)
    buffer = io.StringIO()
    logger.stream = buffer
    logger.min_level = Level.DEBUG
    logger.console_output = True
    yield buffer
    logger.close_file()
    logger.stream, logger.min_level, logger.console_output = saved


def test_log_level_filtering(output):
    logger = get_logger()
    logger.log(Level.ERROR, "Error message")
    logger.log(Level.WARNING, "Warning message")
    logger.log(Level.INFO, "Info message")
    logger.log(Level.DEBUG, "Debug message")

    logger.min_level = Level.WARNING
    logger.log(Level.INFO, "This should not appear")

    content = output.getvalue()
    assert "Error message" in content
    assert "Warning message" in content
    assert "Info message" in content
    assert "Debug message" in content
    assert "This should not appear" not in content


def test_log_format(output):
    get_logger().log(Level.ERROR, "Test message")
    assert "[ERROR] Test message" in output.getvalue()


def test_thread_safety(output):
    logger = get_logger()
    threads = [
        threading.Thread(target=logger.log, args=(Level.INFO, f"Thread {i}"))
        for i in range(10)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    content = output.getvalue()
    for i in range(10):
        assert f"Thread {i}" in content
    assert len(content.splitlines()) == 10


def test_stream_redirection(output):
    logger = get_logger()
    other = io.StringIO()
    logger.stream = other
    logger.log(Level.INFO, "Stream test")
    assert "Stream test" in other.getvalue()
    assert output.getvalue() == ""


def test_level_shortcuts(output):
    logger = get_logger()
    logger.min_level = Level.TRACE
    logger.trace("t")
    logger.debug("d")
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    logger.fatal("f")
    lines = output.getvalue().splitlines()
    assert [line.split("] [", 1)[1].split("]")[0] for line in lines] == [
        "TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "FATAL"
    ]


def test_console_output_disabled(output):
    logger = get_logger()
    logger.console_output = False
    logger.error("hidden")
    assert output.getvalue() == ""


def test_file_output(output, tmp_path):
    logger = get_logger()
    path = tmp_path / "server.log"
    logger.open_file(path)
    logger.warning("to the file")
    logger.close_file()
    assert "[WARNING] to the file" in path.read_text(encoding="utf-8")
    assert "to the file" in output.getvalue()


def test_independent_logger_default_level():
    buffer = io.StringIO()
    logger = Logger(stream=buffer)
    logger.debug("quiet")
    logger.info("loud")
    assert "quiet" not in buffer.getvalue()
    assert "[INFO] loud" in buffer.getvalue()


def test_get_logger_is_shared(output):
    get_logger().min_level = Level.ERROR
    get_logger().warning("suppressed")
    get_logger().error("shared")
    content = output.getvalue()
    assert "[ERROR] shared" in content
    assert "suppressed" not in content
    assert get_logger().min_level == Level.ERROR