#!/usr/bin/env python3
"""
Login de membro ou contato na API Yapla.

Uso:
    python loginYapla.py --member -l "membro@exemplo.com" -s "senha"
    python loginYapla.py --contact -l "contato@exemplo.com"
    python loginYapla.py --help
"""

import argparse
import getpass
import json
import os
import sys
from typing import List, Optional

from yapla_lib import Config, YaplaError, new_session
from yapla_lib.config import ENV_LOGIN, ENV_PASSWORD


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Login de membro/contato na API Yapla v2",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos:
  # Login de membro
  python loginYapla.py --member -l "membro@exemplo.com" -s "senha"
  
  # Login de contato em outro servidor
  python loginYapla.py --contact -l "contato@exemplo.com" --url "https://s2.yapla.com/api/2"

O arquivo .env pode conter:
  YAPLA_API_KEY=sua_api_key
  YAPLA_LOGIN=login_padrao
  YAPLA_PASSWORD=senha_padrao
        """
    )
    
    modo = parser.add_mutually_exclusive_group()
    modo.add_argument("--member", dest="modo", action="store_const", const="member",
                      help="Login de membro (padrao)")
    modo.add_argument("--contact", dest="modo", action="store_const", const="contact",
                      help="Login de contato")
    parser.set_defaults(modo="member")
    
    parser.add_argument("-l", "--login", type=str, help=f"Login (default: ${ENV_LOGIN})")
    parser.add_argument("-s", "--password", type=str, help=f"Senha (default: ${ENV_PASSWORD})")
    parser.add_argument("--api-key", type=str, help="API key (default: $YAPLA_API_KEY)")
    parser.add_argument("--url", type=str, help="URL base da API")
    parser.add_argument("--timeout", type=float, help="Timeout em segundos")
    parser.add_argument("--debug", action="store_true", help="Modo debug")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    login = args.login or os.getenv(ENV_LOGIN)
    if not login:
        parser.error(f"login obrigatorio (--login ou {ENV_LOGIN})")
    
    password = args.password or os.getenv(ENV_PASSWORD)
    if password is None:
        password = getpass.getpass("Senha: ")
    
    try:
        config = Config.from_env().merge(url=args.url, timeout=args.timeout)
        with new_session(args.api_key, config, debug=args.debug) as api:
            if args.modo == "contact":
                rep = api.login_contact(login, password)
            else:
                rep = api.login_member(login, password)
    except YaplaError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 2
    
    print(json.dumps(rep.to_dict(), ensure_ascii=False, indent=2))
    return 0 if rep.result else 1


if __name__ == "__main__":
    sys.exit(main())
