"""Configuration management for gh2bb."""

from typing import Optional, Dict, Any
from pathlib import Path
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml
from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigurationError

PREFIX_MISSING_MESSAGE = 'GH_PREFIX must be set in .env or environment'


class GitConfig(BaseModel):
    """Git operations configuration."""

    temp_dir: Optional[str] = Field(
        default=None,
        description='Base directory for the temporary mirror clone. If not specified, uses system temp directory.',
    )
    executable: str = Field(default='git', description='Git executable to invoke')

    @field_validator('temp_dir')
    @classmethod
    def validate_temp_dir(cls, v):
        """Validate temp directory path."""
        if v is not None and not Path(v).is_absolute():
            raise ValueError('temp_dir must be an absolute path')
        return v

    @field_validator('executable')
    @classmethod
    def validate_executable(cls, v):
        if not v.strip():
            raise ValueError('Git executable must not be empty')
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default='INFO', description='Log level')
    file: Optional[str] = Field(default=None, description='Log file path')
    format: Optional[str] = Field(default=None, description='Console log format')

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class Config(BaseModel):
    """Main configuration class for gh2bb."""

    model_config = ConfigDict(extra='forbid')

    prefix: str = Field(..., description='Namespace of the source repository')
    source_host: str = Field(
        default='github.com', description='SSH host the repository is cloned from'
    )
    git: GitConfig = Field(
        default_factory=GitConfig, description='Git operations settings'
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description='Logging settings'
    )

    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v):
        """Validate the source namespace is not blank."""
        if not v.strip():
            raise ValueError('prefix must not be empty')
        return v

    @field_validator('source_host')
    @classmethod
    def validate_source_host(cls, v):
        """Validate the source host is a bare host name."""
        if not v.strip():
            raise ValueError('source_host must not be empty')
        if '/' in v or ':' in v:
            raise ValueError('source_host must be a host name, not a URL')
        return v

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f'Invalid YAML in {config_path}: {e}') from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f'{config_path} must contain a mapping')

        if not config_data.get('prefix'):
            raise ConfigurationError(f'prefix must be set in {config_path}')

        return cls._build(config_data)

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        # Load .env file from the working directory if it exists
        load_dotenv(find_dotenv(usecwd=True))

        prefix = os.getenv('GH_PREFIX')
        if not prefix:
            raise ConfigurationError(PREFIX_MISSING_MESSAGE)

        config_data = {
            'prefix': prefix,
            'source_host': os.getenv('GH_SOURCE_HOST'),
            'git': {
                'temp_dir': os.getenv('GIT_TEMP_DIR'),
                'executable': os.getenv('GIT_EXECUTABLE'),
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL'),
                'file': os.getenv('LOG_FILE'),
            },
        }

        # Remove None values
        config_data = cls._remove_none_values(config_data)

        return cls._build(config_data)

    @classmethod
    def _build(cls, config_data: Dict[str, Any]) -> 'Config':
        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f'Invalid configuration: {e}') from e

    @staticmethod
    def _remove_none_values(data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively remove None values from dictionary."""
        if isinstance(data, dict):
            return {
                k: Config._remove_none_values(v)
                for k, v in data.items()
                if v is not None
            }
        return data
