#!/usr/bin/env python3
"""
Create an administrator in the Minimal API database.

The payload goes through the same validation as ``POST /administrators``
and the email must not be registered yet.  Tables are created if the
database is new.

Usage:
    python scripts/create_admin.py --db sqlite:///minimal_api.db --email adm@example.com --profile Admin

If --password is omitted, you will be prompted to enter it securely.
--db defaults to the DATABASE_URL environment variable.
"""

import argparse
import getpass
import os
import sys

from minimal_api.app.core.db import create_db_engine, create_session_factory, init_db
from minimal_api.app.repositories.administrator_repository import AdministratorRepository
from minimal_api.app.schemas.administrator import AdministratorDTO
from minimal_api.app.services.administrator_service import AdministratorService
from minimal_api.app.services.validation import EMAIL_TAKEN, validate_administrator


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Create a Minimal API administrator.")
    ap.add_argument("--db", default=os.getenv("DATABASE_URL", "sqlite:///minimal_api.db"), help="SQLAlchemy database URL")
    ap.add_argument("--email", required=True, help="Administrator email")
    ap.add_argument("--password", help="Password. If omitted, you'll be prompted securely.")
    ap.add_argument("--profile", default="Admin", choices=["Admin", "Editor"], help="Role of the new administrator")
    args = ap.parse_args(argv)

    password = args.password if args.password is not None else getpass.getpass("Password: ")
    data = AdministratorDTO(email=args.email, password=password, profile=args.profile)

    engine = create_db_engine(args.db)
    try:
        init_db(engine)
        with create_session_factory(engine)() as session:
            service = AdministratorService(AdministratorRepository(session))
            validation = validate_administrator(data)
            if not validation.messages and service.email_taken(data.email):
                validation.messages.append(EMAIL_TAKEN)
            if validation.messages:
                for message in validation.messages:
                    print(f"[!] {message}", file=sys.stderr)
                return 1
            administrator = service.create(data)
            print(f"[+] Created {administrator.profile} {administrator.email} (id {administrator.id})")
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
