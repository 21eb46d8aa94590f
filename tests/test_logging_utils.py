"""Mini README: Tests for logging helpers and the log level setting."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from scenebundle.configuration import SceneBundleSettings
from scenebundle.logging_utils import configure_root_logger, get_logger, level_from_name


def test_level_names_are_case_insensitive() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Warning ") == logging.WARNING


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        level_from_name("chatty")


def test_reconfiguring_adjusts_level_without_new_handlers() -> None:
    root = logging.getLogger()
    previous = root.level
    get_logger("scenebundle.tests")
    handlers = list(root.handlers)
    try:
        configure_root_logger("error")
        assert root.level == logging.ERROR
        assert root.handlers == handlers
    finally:
        root.setLevel(previous)


def test_settings_normalise_and_validate_log_level(tmp_path) -> None:
    assert SceneBundleSettings(project_root=tmp_path, log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        SceneBundleSettings(project_root=tmp_path, log_level="chatty")
