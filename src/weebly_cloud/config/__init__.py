"""
Configuration management for Weebly Cloud Python SDK

This module loads API credentials and client settings from the environment
or from JSON configuration files.
"""

from .settings import (
    Settings,
    LoggingConfig,
    ENV_PUBLIC_KEY,
    ENV_SECRET,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    ENV_DEBUG,
    ENV_LOG_LEVEL,
    load_settings,
    configure_logging,
)

__all__ = [
    'Settings',
    'LoggingConfig',
    'ENV_PUBLIC_KEY',
    'ENV_SECRET',
    'ENV_BASE_URL',
    'ENV_TIMEOUT',
    'ENV_DEBUG',
    'ENV_LOG_LEVEL',
    'load_settings',
    'configure_logging',
]
