"""
Configuration Module

This module provides centralized configuration management for Elastic operations:
- Connection configuration (URL, authentication, timeouts, default headers)
- Search request defaults
- Logging settings
- Configuration loading from YAML files and environment variables

Implements an environment-aware configuration system with sensible
defaults and validation using Pydantic.
"""

from .settings import (
    ElasticSettings,
    ConnectionSettings,
    SearchSettings,
    MonitoringSettings,
    load_settings,
)

__all__ = [
    'ElasticSettings',
    'ConnectionSettings',
    'SearchSettings',
    'MonitoringSettings',
    'load_settings',
]
