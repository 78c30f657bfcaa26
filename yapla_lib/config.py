"""
Configuracoes e constantes compartilhadas do cliente Yapla.
"""

import os
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Optional

from .errors import ConfigError

# URLs do sistema
DEFAULT_URL = "https://s1.yapla.com/api/2"

# Endpoints da API
AUTH_PATH = "/authentication"
MEMBER_LOGIN_PATH = "/member/login"
CONTACT_LOGIN_PATH = "/contact/login"

# Headers padrão para requisições HTTP
DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}
TOKEN_HEADER = "token"

# Configurações de tempo
DEFAULT_TIMEOUT = 10
TOKEN_RENEW_MARGIN = timedelta(minutes=2)

# Variaveis de ambiente (.env)
ENV_API_KEY = "YAPLA_API_KEY"
ENV_URL = "YAPLA_URL"
ENV_TIMEOUT = "YAPLA_TIMEOUT"
ENV_LOGIN = "YAPLA_LOGIN"
ENV_PASSWORD = "YAPLA_PASSWORD"


@dataclass(frozen=True)
class Config:
    """Configuracao de transporte da API (imutavel apos a criacao)."""
    url: str = DEFAULT_URL
    timeout: float = DEFAULT_TIMEOUT
    
    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url.strip():
            raise ConfigError(f"URL da API invalida: {self.url!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigError(f"Timeout invalido: {self.timeout!r}")
        if self.timeout <= 0:
            raise ConfigError(f"Timeout deve ser positivo: {self.timeout!r}")
        object.__setattr__(self, "url", self.url.strip().rstrip("/"))
    
    def merge(self, url: Optional[str] = None, timeout: Optional[float] = None) -> "Config":
        """Retorna nova configuracao com os campos informados sobrepostos."""
        changes = {}
        if url is not None:
            changes["url"] = url
        if timeout is not None:
            changes["timeout"] = timeout
        return replace(self, **changes) if changes else self
    
    @classmethod
    def from_env(cls) -> "Config":
        """Le YAPLA_URL e YAPLA_TIMEOUT, usando os padroes quando ausentes."""
        url = os.getenv(ENV_URL) or DEFAULT_URL
        raw_timeout = os.getenv(ENV_TIMEOUT)
        if not raw_timeout:
            return cls(url=url)
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"{ENV_TIMEOUT} invalido: {raw_timeout!r}")
        return cls(url=url, timeout=timeout)


def resolve_config(
    config: Optional[Config] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None
) -> Config:
    """Combina configuracao explicita e campos avulsos sobre os padroes."""
    base = config if config is not None else Config()
    return base.merge(url=url, timeout=timeout)
