"""Módulo core - componentes fundamentais."""

from .token_manager import TokenManager
from .http_client import YaplaHttpClient

__all__ = ["TokenManager", "YaplaHttpClient"]
