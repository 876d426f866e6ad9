"""
Pydantic Settings for Elastic Operations

This module provides strongly-typed configuration settings using Pydantic,
with support for environment variables and YAML configuration files.
"""

from typing import Dict, Optional, Union
from pathlib import Path
import os

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_yaml import to_yaml_file

from elastic_ops_exceptions import ConfigurationError


class ConnectionSettings(BaseSettings):
    """
    Connection settings for reaching the search engine's HTTP API.

    These settings control how the shared client talks to the engine, including:
    - Server location and authentication
    - TLS certificate verification
    - Request timeout behavior
    - Headers sent with every request
    """
    url: str = Field("http://localhost:9200",
                     description="Base URL of the search engine (ELASTIC_URL)")
    username: str = Field("",
                          description="Username for basic authentication (if enabled on server)")
    password: str = Field("",
                          description="Password for basic authentication (if enabled on server)")
    api_key: str = Field("",
                         description="Encoded API key; takes precedence over basic authentication")
    timeout: float = Field(30.0,
                           description="Transport timeout in seconds for a single request")
    verify_certs: bool = Field(True,
                               description="Whether to verify TLS certificates of the server")
    headers: Dict[str, str] = Field(default_factory=dict,
                                    description="Headers added to every outbound request")

    model_config = SettingsConfigDict(env_prefix="ELASTIC_", case_sensitive=False)


class SearchSettings(BaseSettings):
    """
    Search settings applied to search-template requests built by the client.

    Diagnostic flags left as None are not sent at all, which is different
    from sending them as false.
    """
    pretty: Optional[bool] = Field(None, description="Default for the pretty query parameter")
    human: Optional[bool] = Field(None, description="Default for the human query parameter")
    error_trace: Optional[bool] = Field(None, description="Default for the error_trace query parameter")

    model_config = SettingsConfigDict(env_prefix="ELASTIC_SEARCH_", case_sensitive=False)


class MonitoringSettings(BaseSettings):
    """
    Monitoring settings for tracking requests sent to the engine.
    """
    log_level: str = Field("INFO",
                           description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    log_requests: bool = Field(False,
                               description="Whether to log every outbound request path and parameters at DEBUG")

    model_config = SettingsConfigDict(env_prefix="ELASTIC_", case_sensitive=False)


class ElasticSettings(BaseSettings):
    """
    Main settings class for Elastic operations that consolidates all configuration categories.

    Usage:
        # Load from environment variables and defaults
        settings = ElasticSettings()

        # Load from YAML file
        settings = ElasticSettings.from_yaml('config.yaml')

        # Access nested settings
        url = settings.connection.url
        timeout = settings.connection.timeout
    """
    connection: ConnectionSettings = Field(default_factory=ConnectionSettings,
                                           description="Connection settings for the search engine")
    search: SearchSettings = Field(default_factory=SearchSettings,
                                   description="Defaults for search requests")
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings,
                                           description="Logging and request tracing settings")

    model_config = SettingsConfigDict(
        env_prefix="ELASTIC_",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    @classmethod
    def from_yaml(cls, yaml_file: Union[str, Path]) -> "ElasticSettings":
        """
        Load settings from YAML file

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML,
                or holds values that fail validation
        """
        try:
            with open(yaml_file, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration file {yaml_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {yaml_file} must contain a mapping")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {yaml_file}: {e}") from e

    def to_yaml(self, yaml_file: Union[str, Path]) -> None:
        """Write settings to a YAML file that from_yaml can read back"""
        to_yaml_file(yaml_file, self)


def load_settings(config_path: Optional[str] = None) -> ElasticSettings:
    """
    Load settings from file and/or environment variables.

    - If config_path is provided and exists, loads settings from the YAML file
    - Otherwise, creates a new settings instance with values from environment variables

    Args:
        config_path: Path to YAML configuration file. If None or file doesn't exist,
                    falls back to environment variables and default values.

    Returns:
        ElasticSettings object with loaded configuration

    Raises:
        ConfigurationError: If the file or environment holds invalid settings

    Example:
        settings = load_settings("/path/to/config.yaml")
        settings = load_settings()
    """
    if config_path and os.path.exists(config_path):
        return ElasticSettings.from_yaml(config_path)
    try:
        return ElasticSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in environment: {e}") from e
