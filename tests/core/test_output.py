"""Tests for the unified output system."""

import pytest
from loguru import logger

from radio_minion.core.output import (
    clear_blessed_mode,
    drain_pending_messages,
    log,
    set_blessed_mode,
    setup_loguru,
)


@pytest.fixture(autouse=True)
def reset_output_mode():
    clear_blessed_mode()
    drain_pending_messages()
    yield
    clear_blessed_mode()
    drain_pending_messages()


def test_cli_mode_prints(capsys) -> None:
    log("hello")
    assert capsys.readouterr().out == "hello\n"
    assert drain_pending_messages() == []


def test_blessed_mode_queues_with_color(capsys) -> None:
    set_blessed_mode()
    log("careful", "warning")
    log("broken", "error")

    assert capsys.readouterr().out == ""
    assert drain_pending_messages() == [("careful", "yellow"), ("broken", "red")]
    assert drain_pending_messages() == []


def test_setup_loguru_writes_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "radio-minion.log"
    setup_loguru(log_file, level="DEBUG")
    try:
        logger.debug("debug line")
        assert "debug line" in log_file.read_text(encoding="utf-8")
    finally:
        logger.remove()
