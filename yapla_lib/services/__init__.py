"""Módulo services - operacoes sobre a API."""

from .auth_service import AuthService
from .login_service import LoginService

__all__ = ["AuthService", "LoginService"]
