"""
Utilitários compartilhados do cliente Yapla.
"""

import re
import sys
import logging
from pathlib import Path
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..errors import ExpireFormatError


# FUNÇÕES DE DATA

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})",
    re.ASCII
)


def parse_rfc3339(value: str) -> datetime:
    """
    Converte timestamp RFC 3339 estrito em datetime com fuso.
    Levanta ValueError se o formato nao confere.
    """
    match = _RFC3339.fullmatch(value)
    if not match:
        raise ValueError(f"nao e RFC 3339: {value!r}")
    
    year, month, day, hour, minute, second, frac, offset = match.groups()
    
    if offset == "Z":
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"offset invalido: {offset!r}")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    
    # datetime suporta apenas microssegundos
    microsecond = int((frac or "0")[:6].ljust(6, "0"))
    
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second),
        microsecond, tzinfo=tz
    )


def expire_to_time(value: str) -> datetime:
    """
    Interpreta o campo `expire_date` da API.
    
    Aceita RFC 3339 completo e os formatos sem fuso "data hora" ou
    "dataThora", que sao tratados como UTC.
    """
    value = value.strip()
    
    try:
        return parse_rfc3339(value)
    except ValueError:
        pass
    
    if "T" in value:
        partes = value.split("T")
    else:
        partes = value.split(" ")
    
    if len(partes) != 2:
        raise ExpireFormatError(value)
    
    try:
        return parse_rfc3339(f"{partes[0]}T{partes[1]}Z")
    except ValueError as e:
        raise ExpireFormatError(value, str(e)) from e


# FUNÇÕES DE STRING

def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """Oculta segredo para uso em logs."""
    if not secret:
        return "<vazio>"
    if len(secret) <= visible:
        return "****"
    return f"{secret[:visible]}****"


# LOGGER

class YaplaLogger:
    """Logger customizado para o cliente Yapla."""
    
    _instances = {}
    
    def __new__(cls, name: str = "yapla", log_dir: Optional[Path] = None, debug: bool = False):
        # Singleton por nome
        if name not in cls._instances:
            instance = super().__new__(cls)
            cls._instances[name] = instance
        return cls._instances[name]
    
    def __init__(self, name: str = "yapla", log_dir: Optional[Path] = None, debug: bool = False):
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        
        self.name = name
        
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)
        self.logger.handlers.clear()
        
        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        
        # Console handler (stderr)
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.DEBUG if debug else logging.INFO)
        console.setFormatter(formatter)
        self.logger.addHandler(console)
        
        # File handler
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                log_dir / f"yapla_{datetime.now().strftime('%Y%m%d')}.log",
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
    
    def info(self, msg: str):
        self.logger.info(msg)
    
    def debug(self, msg: str):
        self.logger.debug(msg)
    
    def warning(self, msg: str):
        self.logger.warning(msg)
    
    def success(self, msg: str):
        self.logger.info(f"[OK] {msg}")


def get_logger(name: str = "yapla", log_dir: Optional[Path] = None, debug: bool = False) -> YaplaLogger:
    """Obtém instância do logger."""
    return YaplaLogger(name, log_dir, debug)
