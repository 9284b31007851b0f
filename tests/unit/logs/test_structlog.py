import logging

import pytest
import structlog

from numeric_core.logs.structlog import LOGGER_NAME, configure, logger


@pytest.fixture
def package_logger():
    package = logging.getLogger(LOGGER_NAME)
    yield package
    for handler in list(package.handlers):
        package.removeHandler(handler)
        handler.close()
    package.setLevel(logging.NOTSET)
    package.propagate = True
    structlog.reset_defaults()


def test_configure_scopes_to_package_logger(package_logger):
    root_handlers = list(logging.getLogger().handlers)

    configured = configure(log_level="info")

    assert configured is package_logger
    assert configured.level == logging.INFO
    assert configured.propagate is False
    assert len(configured.handlers) == 1
    assert logging.getLogger().handlers == root_handlers


def test_configure_writes_log_file(tmp_path, package_logger):
    log_file = tmp_path / "logs" / "numeric.log"

    configure(log_level="WARNING", log_file=log_file)
    logger.info("bisection step")
    logger.warning("search did not converge")

    content = log_file.read_text(encoding="utf-8")
    assert "search did not converge" in content
    assert "bisection step" not in content
    assert "\x1b[" not in content  # File output is uncolored


def test_configure_twice_replaces_handlers(tmp_path, package_logger):
    configure(log_file=tmp_path / "first.log")
    configure(log_level="DEBUG")

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_stdlib_records_share_the_renderer(tmp_path, package_logger):
    log_file = tmp_path / "numeric.log"
    configure(log_level="DEBUG", log_file=log_file)

    logging.getLogger(f"{LOGGER_NAME}.floats").debug("plain stdlib record")

    content = log_file.read_text(encoding="utf-8")
    assert "plain stdlib record" in content
    assert "debug" in content
