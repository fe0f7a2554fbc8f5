"""
Utility modules for tree_selector.
"""

from tree_selector.utils.config import Config, DEFAULT_CONFIG, get_default_config_path
from tree_selector.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'DEFAULT_CONFIG',
    'get_default_config_path',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
