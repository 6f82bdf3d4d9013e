"""Configuration loading."""

from .config import Config, GitConfig, LoggingConfig

__all__ = ['Config', 'GitConfig', 'LoggingConfig']
