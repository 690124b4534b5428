"""
Settings management for Weebly Cloud Python SDK

Loads API credentials and connection settings from the environment, a JSON
string or a JSON file, and configures logging for command-line use.
"""

import os
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import dataclass, field
from pathlib import Path

from ..client import WeeblyCloudClient
from ..exceptions import ConfigurationError, ValidationError
from ..http_client import ClientConfig, DEFAULT_BASE_URL
from ..signing.types import Credentials

ENV_PUBLIC_KEY = "WEEBLY_API_KEY"
ENV_SECRET = "WEEBLY_API_SECRET"
ENV_BASE_URL = "WEEBLY_API_BASE_URL"
ENV_TIMEOUT = "WEEBLY_TIMEOUT"
ENV_DEBUG = "WEEBLY_DEBUG"
ENV_LOG_LEVEL = "WEEBLY_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    """Read a boolean setting; JSON strings such as "false" are rejected."""
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Setting '{key}' must be true or false, got {value!r}",
            "INVALID_FORMAT",
            {'setting': key}
        )
    return value


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"

    def __post_init__(self):
        self.level = str(self.level).upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ConfigurationError(f"Unknown log level: {self.level}", "INVALID_LOG_LEVEL")


@dataclass
class Settings:
    """Everything needed to build a client"""
    credentials: Credentials
    client: ClientConfig = field(default_factory=ClientConfig)
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Settings':
        """
        Build settings from a parsed configuration document.

        Expected keys: public_key, secret, and optionally base_url, timeout,
        verify_ssl, debug_logging, raise_on_error, log_level.
        """
        try:
            credentials = Credentials(
                public_key=data.get('public_key') or '',
                secret=data.get('secret') or ''
            )
            client = ClientConfig(
                base_url=data.get('base_url') or DEFAULT_BASE_URL,
                timeout=float(data.get('timeout', 30.0)),
                verify_ssl=_flag(data, 'verify_ssl', True),
                debug_logging=_flag(data, 'debug_logging', False),
                raise_on_error=_flag(data, 'raise_on_error', False),
            )
            log_config = LoggingConfig(level=data.get('log_level', 'WARNING'))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", "INVALID_FORMAT")
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}", "INVALID_FORMAT")

        return cls(credentials=credentials, client=client, logging_config=log_config)

    @classmethod
    def from_json(cls, json_string: str) -> 'Settings':
        """Load settings from JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a JSON object", "INVALID_FORMAT")
        return cls.from_mapping(data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'Settings':
        """Load settings from file"""
        try:
            path = Path(file_path)
            with open(path, 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", "FILE_ERROR")
        return cls.from_json(json_string)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from WEEBLY_* environment variables"""
        env = os.environ if environ is None else environ
        missing = [name for name in (ENV_PUBLIC_KEY, ENV_SECRET) if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing environment variables: {', '.join(missing)}",
                "MISSING_CREDENTIALS"
            )

        data: Dict[str, Any] = {
            'public_key': env[ENV_PUBLIC_KEY],
            'secret': env[ENV_SECRET],
            'debug_logging': env.get(ENV_DEBUG, '').strip().lower() in _TRUE_VALUES,
        }
        if env.get(ENV_BASE_URL):
            data['base_url'] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            data['timeout'] = env[ENV_TIMEOUT]
        if env.get(ENV_LOG_LEVEL):
            data['log_level'] = env[ENV_LOG_LEVEL]
        return cls.from_mapping(data)

    def create_client(self) -> WeeblyCloudClient:
        """Build a WeeblyCloudClient from these settings."""
        return WeeblyCloudClient(self.credentials, self.client)


def load_settings(file_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a file when given, otherwise from the environment.
    """
    if file_path:
        return Settings.from_file(file_path)
    return Settings.from_env()


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    """
    Attach a stream handler to the SDK logger.

    The SDK itself only creates loggers; applications normally configure
    handlers. This helper is meant for the command-line interface.
    """
    if isinstance(level, str):
        level = LoggingConfig(level).level
    sdk_logger = logging.getLogger('weebly_cloud')
    if not sdk_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        sdk_logger.addHandler(handler)
    sdk_logger.setLevel(level)
