"""Moto transport HTTP API - bootstrap and health endpoint."""

from moto_api.app import create_app
from moto_api.config import WebAppConfig
from moto_api.settings import ConfigurationError, Settings, load_settings

__all__ = ["create_app", "WebAppConfig", "ConfigurationError", "Settings", "load_settings"]
