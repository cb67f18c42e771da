from __future__ import annotations

import logging

from infopathreader import logger as package_logger
from infopathreader.logging import _rename_event_key, configure_logging, get_logger
from infopathreader.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))


def test_rename_event_key_publishes_message() -> None:
    event = _rename_event_key(logging.getLogger("test"), "info", {"event": "View rendered", "view": "Main"})

    assert event == {"message": "View rendered", "view": "Main"}
