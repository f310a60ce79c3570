"""
Utility modules for the render engine.
"""

from render_engine.utils.config import Config
from render_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
