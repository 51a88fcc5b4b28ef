#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backend/scripts/generar_admin.py

Genera el hash Argon2 de una contraseña y el SQL para crear el primer
usuario ADMIN del panel (bootstrap de una base recién creada).

Uso:
    python scripts/generar_admin.py
    python scripts/generar_admin.py --email admin@codeplex.com --nombre "Administrador Principal"

Si no se pasa --password se solicita por consola sin eco.

Autor: CODEPLEX
Fecha: 2026-02-10
"""

import argparse
import getpass
import sys
import uuid
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.modules.auth.repositories import normalize_email  # noqa: E402
from app.modules.auth.security import hash_password  # noqa: E402

DEFAULT_EMAIL = "admin@codeplex.com"
DEFAULT_NOMBRE = "Administrador Principal"
MIN_PASSWORD_LENGTH = 6


def _sql_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_insert_sql(email: str, nombre: str, password_hash: str) -> str:
    email = normalize_email(email)
    return f"""
DELETE FROM usuarios_admin WHERE email = {_sql_literal(email)};

INSERT INTO usuarios_admin (
    id,
    email,
    nombre_completo,
    password_hash,
    rol,
    debe_cambiar_password,
    activo
) VALUES (
    {_sql_literal(str(uuid.uuid4()))},
    {_sql_literal(email)},
    {_sql_literal(nombre)},
    {_sql_literal(password_hash)},
    'ADMIN',
    false,
    true
);
"""


def _read_password() -> str:
    password = getpass.getpass("Contraseña: ")
    if password != getpass.getpass("Repite la contraseña: "):
        raise SystemExit("Las contraseñas no coinciden")
    return password


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Genera el SQL del primer usuario ADMIN")
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    parser.add_argument("--nombre", default=DEFAULT_NOMBRE)
    parser.add_argument("--password", default=None, help="Si se omite, se solicita por consola")
    args = parser.parse_args(argv)

    password = args.password if args.password is not None else _read_password()
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres", file=sys.stderr)
        return 1

    password_hash = hash_password(password)
    print(f"\nHash Argon2:\n{password_hash}")
    print("\n--- COPIA DESDE AQUI ---")
    print(build_insert_sql(args.email, args.nombre, password_hash))
    print("--- HASTA AQUI ---\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# Fin del archivo backend/scripts/generar_admin.py
