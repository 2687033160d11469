from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from record_dashboard.logging_config import configure_logging


def _restore(root, handlers, level):
    root.handlers[:] = handlers
    root.setLevel(level)


def test_plain_format_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging(logging.DEBUG, force_format="plain")
        configure_logging(logging.DEBUG, force_format="plain")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        _restore(root, saved_handlers, saved_level)


def test_json_is_default(monkeypatch):
    monkeypatch.delenv("RECORD_DASHBOARD_LOG_FORMAT", raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        _restore(root, saved_handlers, saved_level)


def test_env_var_selects_format(monkeypatch):
    monkeypatch.setenv("RECORD_DASHBOARD_LOG_FORMAT", "PLAIN")
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging()
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        _restore(root, saved_handlers, saved_level)
