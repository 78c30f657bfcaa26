"""
Excecoes do cliente Yapla.
"""

from typing import Optional


class YaplaError(Exception):
    """Base para todos os erros do cliente Yapla."""


class ConfigError(YaplaError):
    """Configuracao invalida (URL ou timeout)."""


class TransportError(YaplaError):
    """Falha de conexao ou de rede durante a requisicao."""


class YaplaTimeoutError(TransportError):
    """Requisicao excedeu o timeout configurado."""


class HTTPStatusError(YaplaError):
    """Resposta com status HTTP diferente de 200."""
    
    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"POST {url}: {status}")


class DecodeError(YaplaError):
    """Corpo da resposta nao e um envelope JSON valido."""
    
    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(f"{message}:\n{body}")


class AuthenticationError(YaplaError):
    """Falha ao obter o token de sessao."""


class ExpireFormatError(YaplaError):
    """Data de expiracao em formato inesperado."""
    
    def __init__(self, value: str, reason: Optional[str] = None):
        self.value = value
        message = f"formato inesperado para `expire_date`: `{value}`"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ReplyFieldError(YaplaError):
    """Campo ausente ou de tipo inesperado em Reply.data."""
    
    def __init__(self, key: str, expected: str, value: object = None, missing: bool = False):
        self.key = key
        self.expected = expected
        self.value = value
        if missing:
            message = f"campo `{key}` ausente na resposta"
        else:
            message = f"campo `{key}` deveria ser {expected}, recebido {type(value).__name__}: {value!r}"
        super().__init__(message)
