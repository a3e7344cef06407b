"""Create (or promote) an admin user on the active storage backend.

Usage example:
  python scripts/create_admin.py --email admin@gireach.pk --password 'change-me' \
    --first-name Site --last-name Admin
"""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gireach.schemas.user import UserCreate, UserUpdate
from gireach.services.auth_service import hash_password
from gireach.storage import get_storage
from gireach.utils.permissions import ADMIN


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an admin user.")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--first-name", default="Site")
    parser.add_argument("--last-name", default="Admin")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if len(args.password) < 6:
        raise SystemExit("Password must be at least 6 characters.")

    storage = get_storage()
    if storage.uses_database:
        storage.delegate.create_tables()

    existing = storage.get_user_by_email(args.email)
    if existing:
        storage.update_user(existing.id, UserUpdate(role=ADMIN, password=hash_password(args.password), is_active=True))
        print(f"Promoted existing user {args.email} to admin.")
        return

    user = storage.create_user(
        UserCreate(
            email=args.email,
            password=hash_password(args.password),
            first_name=args.first_name,
            last_name=args.last_name,
            role=ADMIN,
        )
    )
    print(f"Created admin {user.email} ({user.id}).")


if __name__ == "__main__":
    main()
