"""
Servico de login de membros e contatos.
"""

from ..config import CONTACT_LOGIN_PATH, MEMBER_LOGIN_PATH
from ..core import YaplaHttpClient
from ..models import Reply
from ..utils import get_logger
from .auth_service import AuthService


class LoginService:
    """Login de usuarios finais (membro ou contato) na conta Yapla."""
    
    def __init__(self, http_client: YaplaHttpClient, auth_service: AuthService):
        self.client = http_client
        self.auth = auth_service
        self.logger = get_logger()
    
    def login_member(self, login: str, password: str) -> Reply:
        return self._login(MEMBER_LOGIN_PATH, login, password)
    
    def login_contact(self, login: str, password: str) -> Reply:
        return self._login(CONTACT_LOGIN_PATH, login, password)
    
    def _login(self, path: str, login: str, password: str) -> Reply:
        token = self.auth.ensure_token()
        
        rep = self.client.post(
            path,
            {"login": login, "password": password},
            token
        )
        
        if rep.result:
            self.logger.info(f"Login {path} aceito para {login}")
        else:
            self.logger.warning(f"Login {path} recusado para {login}: [{rep.error_code}] {rep.error_type}")
        return rep
