"""
Cliente HTTP base para comunicacao com a API Yapla.
"""

import json
import time
import requests
from typing import Dict, Optional

from ..config import Config, DEFAULT_HEADERS, TOKEN_HEADER
from ..errors import DecodeError, HTTPStatusError, TransportError, YaplaTimeoutError
from ..models import Reply
from ..utils import get_logger

# bytes por leitura do corpo; o prazo e conferido a cada leitura
READ_CHUNK_SIZE = 1


class YaplaHttpClient:
    """Cliente HTTP configurado para a API Yapla."""
    
    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.session = requests.Session()
        self.logger = get_logger()
    
    def build_url(self, path: str) -> str:
        return f"{self.config.url}{path}"
    
    def get_api_headers(self, token: str = "") -> Dict[str, str]:
        """Headers JSON; `token` apenas quando houver sessao."""
        headers = dict(DEFAULT_HEADERS)
        if token:
            headers[TOKEN_HEADER] = token
        return headers
    
    def post(self, path: str, content: Dict[str, str], token: str = "") -> Reply:
        """
        POST JSON para `config.url + path` e decodifica o envelope de resposta.
        
        O timeout cobre toda a ida e volta (conexao, status e corpo).
        Qualquer status diferente de 200 e tratado como erro.
        """
        url = self.build_url(path)
        
        try:
            body = json.dumps(content)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"falha ao serializar requisicao: {e}", repr(content)) from e
        
        deadline = time.monotonic() + self.config.timeout
        
        try:
            resp = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers=self.get_api_headers(token),
                timeout=self.config.timeout,
                stream=True
            )
            try:
                self.logger.debug(f"POST {url} -> {resp.status_code}")
                
                if resp.status_code != 200:
                    raise HTTPStatusError(url, resp.status_code, resp.reason or "")
                
                raw = self._read_body(resp, url, deadline)
            finally:
                resp.close()
        except requests.Timeout as e:
            raise YaplaTimeoutError(f"POST {url}: timeout apos {self.config.timeout}s") from e
        except requests.RequestException as e:
            raise TransportError(f"POST {url}: {e}") from e
        
        # bytes crus: json detecta UTF-8/16/32, sem depender do charset do header
        text = raw.decode("utf-8", "replace")
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise DecodeError(str(e), text) from e
        
        return Reply.from_dict(payload, text)
    
    def _read_body(self, resp: requests.Response, url: str, deadline: float) -> bytes:
        """Le o corpo inteiro, abortando quando o prazo da requisicao se esgota."""
        chunks = []
        if time.monotonic() > deadline:
            raise YaplaTimeoutError(f"POST {url}: timeout apos {self.config.timeout}s")
        for chunk in resp.iter_content(chunk_size=READ_CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise YaplaTimeoutError(f"POST {url}: timeout apos {self.config.timeout}s")
            chunks.append(chunk)
        return b"".join(chunks)
    
    def close(self):
        self.session.close()
