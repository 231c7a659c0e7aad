"""Tests for debug log setup."""

import logging

from storefront.logs import configure_logging, resolve_debug_log_path


def test_env_override(monkeypatch, tmp_path):
    target = tmp_path / "debug.log"
    monkeypatch.setenv("STOREFRONT_DEBUG_LOG", str(target))
    assert resolve_debug_log_path() == target


def test_writes_to_file(tmp_path):
    target = tmp_path / "logs" / "debug.log"
    logger = configure_logging(target)
    try:
        logging.getLogger("storefront.cart").info("cart_clear")
        for handler in logger.handlers:
            handler.flush()
        assert "cart_clear" in target.read_text(encoding="utf-8")

        configure_logging(target)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
