import pytest
import structlog

from billsplit.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_console_renderer():
    configure_logging("debug", json_logs=False)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    get_logger("billsplit.test").debug("logging.console", ok=True)


def test_configure_logging_json_renderer():
    configure_logging("INFO")

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
