"""
Gerenciador do token de sessao em memoria.
"""

import threading
from datetime import datetime
from typing import Optional

from ..models import Token


class TokenManager:
    """
    Guarda o token da API.
    
    Nao ha persistencia: o token vive apenas enquanto o cliente existir.
    Quem renova deve segurar `lock` durante a verificacao e a troca.
    """
    
    def __init__(self):
        self.lock = threading.RLock()
        self._token = Token()
    
    @property
    def token(self) -> Token:
        with self.lock:
            return Token(self._token.key, self._token.expire)
    
    @property
    def key(self) -> str:
        with self.lock:
            return self._token.key
    
    def is_token_valid(self, now: Optional[datetime] = None) -> bool:
        """Verifica se o token ainda expira depois da margem de renovacao."""
        with self.lock:
            return self._token.is_fresh(now)
    
    def update(self, key: str, expire: datetime):
        with self.lock:
            self._token = Token(key, expire)
    
    def clear_token(self):
        """Descarta token atual, forcando renovacao no proximo uso."""
        with self.lock:
            self._token = Token()
