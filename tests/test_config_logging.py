import logging

import pytest

from symbolic_calculus import (
    CalculusConfig, get_config, set_config, reset_config,
    LogLevel, get_logger, set_log_level, configure_logging,
    ExpressionError, DivisionByZeroError, DomainError, ExpressionDepthError,
    InvalidExpressionError, __version__
)
from symbolic_calculus.config import EPSILON, DEFAULT_MAX_TREE_DEPTH
from symbolic_calculus.logging_system import log_warning


def test_defaults():
    config = get_config()
    assert config.max_tree_depth == DEFAULT_MAX_TREE_DEPTH == 400
    assert config.max_simplify_passes == 32
    assert config.log_level == LogLevel.MINIMAL
    assert EPSILON == 1e-12
    assert __version__ == "0.1.0"


def test_overrides_and_reset():
    set_config(max_simplify_passes=3)
    assert get_config().max_simplify_passes == 3
    assert get_config().max_tree_depth == 400

    set_config(CalculusConfig(max_tree_depth=50))
    assert get_config().max_tree_depth == 50
    assert get_config().max_simplify_passes == 32

    reset_config()
    assert get_config() == CalculusConfig()


def test_invalid_settings():
    with pytest.raises(ValueError):
        CalculusConfig(max_tree_depth=0)
    with pytest.raises(ValueError):
        set_config(max_simplify_passes=-1)


def test_set_config_applies_log_level():
    set_config(log_level=LogLevel.DETAILED)
    assert get_logger().log_level == LogLevel.DETAILED


def test_level_gating():
    set_log_level(LogLevel.SILENT)
    assert not get_logger().should_log(LogLevel.MINIMAL)
    set_log_level(LogLevel.MODERATE)
    assert get_logger().should_log(LogLevel.MODERATE)
    assert not get_logger().should_log(LogLevel.DETAILED)


def test_warnings_reach_the_named_logger(caplog):
    with caplog.at_level(logging.WARNING, logger="symbolic_calculus"):
        log_warning("threshold reached")
    assert [r.name for r in caplog.records] == ["symbolic_calculus"]
    assert "threshold reached" in caplog.text


def test_file_logging(tmp_path):
    path = tmp_path / "calculus.log"
    configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(path))
    log_warning("written to disk")
    assert "written to disk" in path.read_text()


def test_error_hierarchy():
    assert issubclass(DivisionByZeroError, ZeroDivisionError)
    assert issubclass(DomainError, ValueError)
    assert issubclass(ExpressionDepthError, RecursionError)
    assert issubclass(InvalidExpressionError, TypeError)
    for error in (DivisionByZeroError, DomainError, ExpressionDepthError, InvalidExpressionError):
        assert issubclass(error, ExpressionError)
    error = ExpressionDepthError(12, 10)
    assert error.depth == 12
    assert "12" in str(error)
