"""
Configuration module for the work-time calculator.
"""
from .settings import (
    WorkTimeConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'WorkTimeConfig',
    'get_config',
    'load_config',
    'reload_config'
]
