#!/usr/bin/env python3
"""Promote an existing account to admin.

A fresh database has no admin, so the role-change API cannot be used yet.
Register the account through POST /auth/register first, then run:
    python scripts/create_admin.py someone@example.com
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session  # noqa: E402

from motortech.auth.service import get_user_by_email  # noqa: E402
from motortech.db.engine import engine  # noqa: E402
from motortech.user.models import UserRole  # noqa: E402


def promote(session: Session, email: str) -> bool:
    """Set role admin on the account. Returns False if no such account."""
    user = get_user_by_email(session, email)
    if user is None:
        return False
    user.role = UserRole.admin
    session.add(user)
    session.commit()
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="email of a registered account")
    args = parser.parse_args()

    with Session(engine) as session:
        if not promote(session, args.email):
            print(f"No account registered with {args.email}", file=sys.stderr)
            return 1
    print(f"{args.email} is now an admin")
    return 0


if __name__ == "__main__":
    sys.exit(main())
