"""
Modelos de dados compartilhados do cliente Yapla.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..config import TOKEN_RENEW_MARGIN
from ..errors import DecodeError, ReplyFieldError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Token:
    """Token de sessao da API e seu instante de expiracao."""
    key: str = ""
    expire: datetime = field(default_factory=_utcnow)
    
    def is_fresh(self, now: Optional[datetime] = None) -> bool:
        """Token utilizavel se expira mais de TOKEN_RENEW_MARGIN depois de agora."""
        now = now or _utcnow()
        return self.expire > now + TOKEN_RENEW_MARGIN
    
    def __repr__(self) -> str:
        # nunca expor o token em logs
        masked = f"{self.key[:4]}****" if self.key else ""
        return f"Token(key={masked!r}, expire={self.expire.isoformat()})"


@dataclass
class Reply:
    """
    Envelope de resposta da API.
    
    Sucesso: `data` tem formato livre, dependente do endpoint.
    Erro: `data` costuma conter `code`, `type` e `message`.
    """
    result: bool = False
    data: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, payload: Any, body: str = "") -> "Reply":
        if not isinstance(payload, dict):
            raise DecodeError("resposta nao e um objeto JSON", body)
        
        data = payload.get("data")
        # backend PHP serializa mapa vazio como []
        if data is None or data == []:
            data = {}
        if not isinstance(data, dict):
            raise DecodeError("campo `data` nao e um objeto JSON", body)
        
        result = payload.get("result")
        if result is None:
            result = False
        if not isinstance(result, bool):
            raise DecodeError("campo `result` nao e booleano", body)
        
        return cls(result=result, data=data)
    
    @property
    def ok(self) -> bool:
        return self.result
    
    @property
    def error_code(self) -> Optional[Any]:
        return None if self.result else self.data.get("code")
    
    @property
    def error_type(self) -> Optional[str]:
        return None if self.result else self.data.get("type")
    
    @property
    def error_message(self) -> Optional[str]:
        return None if self.result else self.data.get("message")
    
    def get_str(self, key: str) -> str:
        """Retorna data[key] garantindo que e string."""
        if key not in self.data or self.data[key] is None:
            raise ReplyFieldError(key, "string", missing=True)
        value = self.data[key]
        if not isinstance(value, str):
            raise ReplyFieldError(key, "string", value)
        return value
    
    def get_dict(self, key: str) -> Dict[str, Any]:
        """Retorna data[key] garantindo que e um objeto."""
        if key not in self.data or self.data[key] is None:
            raise ReplyFieldError(key, "objeto", missing=True)
        value = self.data[key]
        if not isinstance(value, dict):
            raise ReplyFieldError(key, "objeto", value)
        return value
    
    def to_dict(self) -> Dict[str, Any]:
        return {"result": self.result, "data": self.data}
