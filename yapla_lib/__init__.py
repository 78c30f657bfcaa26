"""
Yapla Lib - Cliente para a API Yapla v2.

Uso básico:
    from yapla_lib import YaplaClient
    
    api = YaplaClient("xxxxxxxxxxxxxxx")
    rep = api.login_member("membro@exemplo.com", "senha")
    if rep.result:
        print(rep.data)
    api.close()

Configuracao opcional:
    from yapla_lib import Config, new_session
    
    api = new_session(config=Config(url="https://s2.yapla.com/api/2", timeout=30))

Sem api_key explicita, `new_session` usa YAPLA_API_KEY (do ambiente ou .env).
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

from .client import YaplaClient
from .config import (
    Config, DEFAULT_URL, DEFAULT_TIMEOUT, TOKEN_RENEW_MARGIN,
    AUTH_PATH, MEMBER_LOGIN_PATH, CONTACT_LOGIN_PATH,
    ENV_API_KEY,
)
from .errors import (
    YaplaError, ConfigError, TransportError, YaplaTimeoutError,
    HTTPStatusError, DecodeError, AuthenticationError,
    ExpireFormatError, ReplyFieldError,
)
from .models import Reply, Token
from .utils import expire_to_time

__version__ = "1.0.0"
__all__ = [
    "YaplaClient", "new_session",
    "Config", "DEFAULT_URL", "DEFAULT_TIMEOUT", "TOKEN_RENEW_MARGIN",
    "AUTH_PATH", "MEMBER_LOGIN_PATH", "CONTACT_LOGIN_PATH",
    "Reply", "Token", "expire_to_time",
    "YaplaError", "ConfigError", "TransportError", "YaplaTimeoutError",
    "HTTPStatusError", "DecodeError", "AuthenticationError",
    "ExpireFormatError", "ReplyFieldError",
]


def new_session(api_key: Optional[str] = None, config: Optional[Config] = None, **kwargs) -> YaplaClient:
    """Cria sessao autenticada; sem api_key e sem config usa o ambiente."""
    if api_key is None:
        api_key = os.getenv(ENV_API_KEY, "")
    if config is None:
        config = Config.from_env()
    return YaplaClient(api_key, config, **kwargs)
