#!/usr/bin/env python3
"""
Create Admin User Script.

Creates an admin user directly in the database, or promotes an existing
user with the same email. Admin status cannot be granted over HTTP, so this
is how the first admin is made.

Usage:
    python auto/create_admin.py
    python auto/create_admin.py --email admin@example.com --password Secret123

Environment Variables:
    ADMIN_NAME: Admin display name (default: Administrator)
    ADMIN_EMAIL: Admin email (default: admin@example.com)
    ADMIN_PASSWORD: Admin password (default: auto-generated)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from os import environ
from pathlib import Path
from secrets import token_urlsafe
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from app.db.database import close_db, init_db, transaction  # noqa: E402
from app.errors import Err, Ok  # noqa: E402
from app.repositories import UserRepository  # noqa: E402
from app.schemas.user import UserIn  # noqa: E402
from app.services import AuthService  # noqa: E402
from app.validators import validate_user  # noqa: E402


def generate_secure_password(length: int = 16) -> str:
    """
    Generate a secure random password.

    Parameters
    ----------
    length : int
        Length of the random part (default: 16).

    Returns
    -------
    str
        Password within the accepted length bounds.
    """
    return f"Admin{token_urlsafe(length)[:12]}"


def parse_args() -> Namespace:
    """
    Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with defaults applied.
    """
    parser = ArgumentParser(
        description="Create or promote an admin user in the database.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python auto/create_admin.py -e admin@mysite.com -p MySecurePass123
  python auto/create_admin.py --name "Site Owner" --email owner@mysite.com
        """,
    )
    parser.add_argument(
        "-n",
        "--name",
        default=environ.get("ADMIN_NAME", "Administrator"),
        help="Admin display name (default: Administrator or ADMIN_NAME env var)",
    )
    parser.add_argument(
        "-e",
        "--email",
        default=environ.get("ADMIN_EMAIL", "admin@example.com"),
        help="Admin email (default: admin@example.com or ADMIN_EMAIL env var)",
    )
    parser.add_argument(
        "-p",
        "--password",
        default=environ.get("ADMIN_PASSWORD"),
        help="Admin password (default: auto-generated or ADMIN_PASSWORD env var)",
    )
    return parser.parse_args()


async def create_admin_user(record: UserIn) -> int:
    """
    Create or promote the admin and print the outcome.

    Parameters
    ----------
    record : UserIn
        Admin name, email and password.

    Returns
    -------
    int
        Process exit code.
    """
    await init_db()
    try:
        async with transaction() as session:
            result = await AuthService(UserRepository(session)).ensure_admin(record)
    finally:
        await close_db()

    match result:
        case Ok((admin, created)):
            action = "created" if created else "promoted"
            print(f"\n✅ Admin user {action} successfully!")
            print(f"   Id:    {admin.id}")
            print(f"   Email: {admin.email}")
            print("\nYou can now login with:")
            print("  curl -X POST 'http://localhost:8000/api/auth' \\")
            print("    -H 'Content-Type: application/json' \\")
            print(f"    -d '{{\"email\": \"{admin.email}\", \"password\": \"YOUR_PASSWORD\"}}'")
            return 0
        case Err(_, detail):
            print(f"❌ {detail}")
            return 1


def main() -> None:
    args = parse_args()
    password = args.password
    auto_generated = password is None
    if auto_generated:
        password = generate_secure_password()

    record = UserIn(name=args.name, email=args.email, password=password)
    if not (result := validate_user(record)).is_valid:
        print(f"❌ {result.error_message}")
        sys_exit(1)

    if auto_generated:
        print(f"✅ Auto-generated password: {password}")
        print("⚠️  Please save this password now! You won't see it again.")

    sys_exit(asyncio_run(create_admin_user(record)))


if __name__ == "__main__":
    main()
