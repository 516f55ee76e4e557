"""
Tests for settings and logging setup.
"""
import logging
from contextlib import contextmanager

import pytest

from product_catalog_api.app.core import config
from product_catalog_api.app.core.logging_config import setup_logging


@pytest.mark.parametrize("raw, expected", [
    ("1", True),
    ("true", True),
    ("YES", True),
    ("false", False),
    ("0", False),
    ("", False),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("PRODUCT_TEST_FLAG", raw)

    assert config._env_flag("PRODUCT_TEST_FLAG", "false") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("PRODUCT_TEST_FLAG", raising=False)

    assert config._env_flag("PRODUCT_TEST_FLAG", "true") is True


def test_settings_overrides():
    settings = config.Settings(project_name="Catalog", seed_products=False, port=9000)

    assert settings.project_name == "Catalog"
    assert settings.seed_products is False
    assert settings.port == 9000


@contextmanager
def bare_root_logger():
    """Temporarily detach every root handler so ``setup_logging`` runs."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


class TestSetupLogging:
    def test_console_and_file_handlers(self, tmp_path):
        logfile = tmp_path / "catalog.log"

        with bare_root_logger() as root:
            setup_logging("debug", str(logfile))

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2
            file_handler = root.handlers[1]
            assert isinstance(file_handler, logging.FileHandler)

            logging.getLogger("product_catalog_api.test").debug("hello file")
            file_handler.flush()
            assert "[DEBUG] product_catalog_api.test: hello file" in logfile.read_text(encoding="utf-8")

    def test_unknown_level_falls_back_to_info(self):
        with bare_root_logger() as root:
            setup_logging("chatty")

            assert root.level == logging.INFO
            assert len(root.handlers) == 1

    def test_configures_only_once(self):
        with bare_root_logger() as root:
            setup_logging("INFO")
            setup_logging("DEBUG")

            assert len(root.handlers) == 1
            assert root.level == logging.INFO
