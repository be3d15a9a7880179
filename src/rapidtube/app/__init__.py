# src/rapidtube/app/__init__.py
"""Application settings and logging setup"""

from .config import Config, get_config, reload_config, reset_config, setup_logging

__all__ = ["Config", "get_config", "reload_config", "reset_config", "setup_logging"]
