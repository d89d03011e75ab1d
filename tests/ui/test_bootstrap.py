"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging

import pytest

from neonchess.ui.bootstrap import _configure_application, configure_logging


def test_unknown_log_level_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="neonchess.ui.bootstrap"):
        configure_logging("chatty")
    assert "Unknown log level" in caplog.text


def test_configure_application_sets_name_and_style(qapp) -> None:
    _configure_application(qapp)
    assert qapp.applicationName() == "Neon Chess"
    assert "QMainWindow" in qapp.styleSheet()
