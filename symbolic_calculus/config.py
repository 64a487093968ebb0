"""
Configuration for the symbolic calculus package.

Numeric constants live at module level; settings a caller may want to tune
at runtime live on CalculusConfig, reachable through get_config().
"""

import math
import threading
from dataclasses import dataclass, replace
from typing import Optional

from .logging_system import LogLevel, configure_logging

# Evaluated trig results this close to 0 or 1 snap to exactly 0.0 or 1.0
EPSILON: float = 1e-12

NATURAL_BASE: float = math.e

# Constants and exponents render like C's "%f"
CONSTANT_DECIMALS: int = 6

DEFAULT_MAX_TREE_DEPTH: int = 400
DEFAULT_MAX_PASSES: int = 32


@dataclass(frozen=True)
class CalculusConfig:
    max_tree_depth: int = DEFAULT_MAX_TREE_DEPTH
    max_simplify_passes: int = DEFAULT_MAX_PASSES
    log_level: LogLevel = LogLevel.MINIMAL
    log_to_file: bool = False
    log_file_path: Optional[str] = None

    def __post_init__(self):
        if self.max_tree_depth < 1:
            raise ValueError(f"max_tree_depth must be positive, got {self.max_tree_depth}")
        if self.max_simplify_passes < 1:
            raise ValueError(f"max_simplify_passes must be positive, got {self.max_simplify_passes}")


_GLOBAL_CONFIG: Optional[CalculusConfig] = None
_CONFIG_LOCK = threading.Lock()


def get_config() -> CalculusConfig:
    """Get the global configuration, creating the default on first use"""
    global _GLOBAL_CONFIG
    if _GLOBAL_CONFIG is not None:
        return _GLOBAL_CONFIG

    with _CONFIG_LOCK:
        if _GLOBAL_CONFIG is None:
            _GLOBAL_CONFIG = CalculusConfig()
    return _GLOBAL_CONFIG


def set_config(config: Optional[CalculusConfig] = None, **overrides) -> CalculusConfig:
    """Replace the global configuration, or override selected fields of it"""
    global _GLOBAL_CONFIG
    with _CONFIG_LOCK:
        base = config if config is not None else (_GLOBAL_CONFIG or CalculusConfig())
        _GLOBAL_CONFIG = replace(base, **overrides) if overrides else base
        new_config = _GLOBAL_CONFIG

    configure_logging(new_config.log_level, new_config.log_to_file, new_config.log_file_path)
    return new_config


def reset_config():
    """Restore defaults"""
    global _GLOBAL_CONFIG
    with _CONFIG_LOCK:
        _GLOBAL_CONFIG = None
