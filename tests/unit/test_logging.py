from __future__ import annotations

from schema_annotator import logger as package_logger
from schema_annotator.logging import configure_logging, get_logger
from schema_annotator.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()
    assert "tests" in captured.err


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))
