"""
Cliente principal da API Yapla - Interface unificada.
"""

from pathlib import Path
from typing import Optional

from .config import Config, resolve_config
from .core import TokenManager, YaplaHttpClient
from .errors import AuthenticationError, YaplaError
from .models import Reply, Token
from .services import AuthService, LoginService
from .utils import get_logger


class YaplaClient:
    """
    Sessao autenticada na API Yapla v2.
    
    A criacao ja autentica com a api_key; o token e renovado
    automaticamente quando falta menos de 2 minutos para expirar.
    
    Nao e seguro compartilhar entre processos; entre threads a
    renovacao do token e serializada por um lock.
    """
    
    def __init__(
        self,
        api_key: str,
        config: Optional[Config] = None,
        *,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        log_dir: Optional[str] = None,
        debug: bool = False
    ):
        self.config = resolve_config(config, url, timeout)
        self.logger = get_logger("yapla", Path(log_dir) if log_dir else None, debug)
        
        self._http = YaplaHttpClient(self.config)
        self._tokens = TokenManager()
        self._auth = AuthService(self._http, self._tokens, api_key)
        self._login = LoginService(self._http, self._auth)
        
        try:
            self._auth.renew_token()
        except AuthenticationError:
            self._http.close()
            raise
        except YaplaError as e:
            self._http.close()
            raise AuthenticationError(f"falha ao autenticar em {self.config.url}: {e}") from e
        
        self.logger.success(f"YaplaClient autenticado em {self.config.url}")
    
    @property
    def token(self) -> Token:
        """Copia do token em cache."""
        return self._tokens.token
    
    def renew_token(self, force: bool = False) -> bool:
        return self._auth.renew_token(force)
    
    def clear_token(self):
        self._auth.clear_token()
    
    def login_member(self, login: str, password: str) -> Reply:
        """Login de membro (acesso aos dados do membro)."""
        return self._login.login_member(login, password)
    
    def login_contact(self, login: str, password: str) -> Reply:
        """Login de contato (acesso aos dados do contato)."""
        return self._login.login_contact(login, password)
    
    def close(self):
        self._http.close()
    
    def __enter__(self) -> "YaplaClient":
        return self
    
    def __exit__(self, *args):
        self.close()
