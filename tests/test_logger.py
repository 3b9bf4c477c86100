"""Tests for the package logger helper."""

import logging

from mipmap_1d import MipMap1D, MipMapConfig
from mipmap_1d.logger import get_logger, set_level


def test_get_logger_namespaces_children():
    """Test child loggers live under the package logger."""
    assert get_logger("mipmap_1d.mipmap").name == "mipmap_1d.mipmap"
    assert get_logger("viewer").name == "mipmap_1d.viewer"
    base = logging.getLogger("mipmap_1d")
    assert base.handlers
    assert base.propagate is False


def test_build_emits_debug_record(package_log_records):
    """Test construction logs the source size and level count."""
    MipMap1D([2, 4, 6, 8, 9])
    messages = [r.getMessage() for r in package_log_records]
    assert any("levels=4" in msg and "n=5" in msg for msg in messages)


def test_build_leaves_logger_level_unchanged(package_log_records):
    """Test building with any config does not touch global logging state."""
    base = logging.getLogger("mipmap_1d")
    set_level(logging.WARNING)
    MipMap1D([1, 2], config=MipMapConfig(copy_source=False, dtype="float32"))
    assert base.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in base.handlers)
    assert package_log_records == []


def test_config_has_no_logging_knob():
    """Test log level is controlled only through set_level."""
    assert not hasattr(MipMapConfig(), "log_level")
