"""
Tests for settings parsing and logger setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from formwright.config import Settings
from formwright.log import logger, setup_logger


@pytest.fixture
def restore_logger():
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSettings:

    def test_defaults(self, settings):
        assert settings.COMPONENTS == ["errors", "hint", "label_input"]
        assert settings.REQUIRED_BY_DEFAULT is True
        assert settings.WRAPPER_TAG == "div"
        assert settings.ITEM_WRAPPER_TAG == "span"
        assert settings.COLLECTION_WRAPPER_TAG is None
        assert settings.BOOLEAN_STYLE == "inline"
        assert settings.INCLUDE_DEFAULT_INPUT_WRAPPER_CLASS is True
        assert settings.I18N_SCOPE == "simple_form"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("FORM_REQUIRED_BY_DEFAULT", "false")
        monkeypatch.setenv("FORM_BOOLEAN_STYLE", "nested")
        monkeypatch.setenv("FORM_COMPONENTS", '["hint", "label_input"]')
        settings = Settings()
        assert settings.REQUIRED_BY_DEFAULT is False
        assert settings.BOOLEAN_STYLE == "nested"
        assert settings.COMPONENTS == ["hint", "label_input"]

    @pytest.mark.parametrize("value", ["false", "none", ""])
    def test_wrapper_switched_off_in_environment(self, monkeypatch, value):
        monkeypatch.setenv("FORM_ITEM_WRAPPER_TAG", value)
        assert Settings().ITEM_WRAPPER_TAG is None

    def test_comma_separated_lists(self):
        settings = Settings(COMPONENTS="hint, label_input", WRAPPER_CLASS="input field")
        assert settings.COMPONENTS == ["hint", "label_input"]
        assert settings.WRAPPER_CLASS == ["input field"]

    def test_invalid_boolean_style(self):
        with pytest.raises(ValidationError):
            Settings(BOOLEAN_STYLE="sideways")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_STD_LEVEL="verbose")

    def test_frozen(self, settings):
        with pytest.raises(ValidationError):
            settings.HTML5 = False

    def test_swap(self, settings):
        swapped = settings.swap(ITEM_WRAPPER_TAG="li", HTML5=False)
        assert swapped.ITEM_WRAPPER_TAG == "li"
        assert swapped.HTML5 is False
        assert settings.ITEM_WRAPPER_TAG == "span"
        assert swapped.COMPONENTS == settings.COMPONENTS

    def test_swap_validates(self, settings):
        with pytest.raises(ValidationError):
            settings.swap(BOOLEAN_STYLE="sideways")

    def test_log_file_parent_is_created(self, tmp_path):
        path = tmp_path / "logs" / "formwright.log"
        Settings(LOG_FILE=str(path))
        assert path.parent.is_dir()


class TestLogger:

    def test_console_only(self, restore_logger, settings):
        ch, fh = setup_logger(settings)
        assert fh is None
        assert logger.handlers == [ch]
        assert ch.level == logging.WARNING
        assert logger.propagate is False

    def test_file_handler(self, restore_logger, tmp_path):
        path = tmp_path / "formwright.log"
        settings = Settings(LOG_FILE=str(path), LOG_STD_LEVEL="ERROR")
        ch, fh = setup_logger(settings)
        assert isinstance(fh, RotatingFileHandler)
        assert ch.level == logging.ERROR
        logger.debug("rendered user_name")
        fh.flush()
        assert "rendered user_name" in path.read_text()

    def test_setup_replaces_handlers(self, restore_logger, settings):
        setup_logger(settings)
        ch, _ = setup_logger(settings)
        assert logger.handlers == [ch]
