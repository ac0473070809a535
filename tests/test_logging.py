"""Tests for package logging setup."""

import logging

import pytest

from wirecross.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    level_for_flags,
)


def test_records_go_to_stderr(capsys):
    get_logger("wirecross.test").warning("routed message")
    captured = capsys.readouterr()
    assert "routed message" in captured.err
    assert "routed message" not in captured.out


def test_record_format(capsys):
    get_logger("wirecross.fmt").info("formatted")
    err = capsys.readouterr().err
    assert " - wirecross.fmt - INFO - formatted" in err


def test_single_package_handler():
    get_logger("wirecross.a")
    get_logger("wirecross.b")
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root.handlers) == 1


def test_child_loggers_follow_configured_level():
    child = get_logger("wirecross.tracer.child")
    assert child.name == "wirecross.tracer.child"

    configure_logging(quiet=True)
    assert child.getEffectiveLevel() == logging.WARNING

    configure_logging(verbose=True)
    assert child.getEffectiveLevel() == logging.DEBUG


def test_debug_hidden_by_default(capsys):
    configure_logging()
    get_logger("wirecross.quiet").debug("hidden detail")
    assert "hidden detail" not in capsys.readouterr().err


@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_for_flags(verbose, quiet, expected):
    assert level_for_flags(verbose, quiet) == expected
    assert configure_logging(verbose, quiet) == expected
