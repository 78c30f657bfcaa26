"""
Servico de autenticacao da API Yapla.
"""

from ..config import AUTH_PATH
from ..core import TokenManager, YaplaHttpClient
from ..errors import AuthenticationError, ReplyFieldError
from ..utils import expire_to_time, get_logger, mask_secret


class AuthService:
    """Servico de autenticacao e renovacao do token de sessao."""
    
    def __init__(self, http_client: YaplaHttpClient, token_manager: TokenManager, api_key: str):
        self.client = http_client
        self.token_manager = token_manager
        self._api_key = api_key
        self.logger = get_logger()
    
    @property
    def api_key(self) -> str:
        return self._api_key
    
    def renew_token(self, force: bool = False) -> bool:
        """
        Renova o token se estiver a menos de 2 minutos de expirar.
        Retorna True se houve renovacao, False se o token atual foi mantido.
        O token antigo so e substituido quando toda a resposta e valida.
        """
        with self.token_manager.lock:
            if not force and self.token_manager.is_token_valid():
                return False
            
            self.logger.debug(f"Renovando token (api_key {mask_secret(self._api_key)})")
            
            rep = self.client.post(
                AUTH_PATH,
                {"api_key": self._api_key},
                self.token_manager.key
            )
            
            if not rep.result and rep.error_message:
                raise AuthenticationError(
                    f"autenticacao recusada: [{rep.error_code}] {rep.error_message}"
                )
            
            try:
                key = rep.get_str("session_token")
                expire_date = rep.get_str("expire_date")
            except ReplyFieldError as e:
                raise AuthenticationError(
                    f"session token ou expire date ausente/invalido ({e}):\n{rep.to_dict()}"
                ) from e
            
            expire = expire_to_time(expire_date)
            
            self.token_manager.update(key, expire)
            self.logger.debug(f"Token renovado, expira em {expire.isoformat()}")
            return True
    
    def ensure_token(self) -> str:
        """Garante token valido e retorna sua chave."""
        with self.token_manager.lock:
            self.renew_token()
            return self.token_manager.key
    
    def clear_token(self):
        """Descarta o token em cache; o proximo uso renova."""
        self.token_manager.clear_token()
