#!/usr/bin/env python3
"""
Grant the admin role outside the set_admin_role callable.

The callable only accepts calls from existing administrators, so the first
administrator of a project is created with this script. It uses Application
Default Credentials (GOOGLE_APPLICATION_CREDENTIALS or gcloud auth) and
honours FIREBASE_AUTH_EMULATOR_HOST when pointed at the emulator.

Usage:
    python scripts/grant_admin.py <uid>
    python scripts/grant_admin.py --email someone@example.com
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import firebase_admin
from firebase_admin import auth

# Make the functions source importable when run from a checkout
FUNCTIONS_DIR = Path(__file__).resolve().parents[1] / "functions"
if str(FUNCTIONS_DIR) not in sys.path:
    sys.path.insert(0, str(FUNCTIONS_DIR))

from roles.set_admin_role import grant_admin_claim  # noqa: E402
from utils.logging_utils import get_logger  # noqa: E402

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grant the admin role to a Firebase user.")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("uid", nargs="?", help="Firebase Authentication UID")
    target.add_argument("--email", help="Look the user up by email address instead")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if not firebase_admin._apps:
        firebase_admin.initialize_app()

    try:
        uid = args.uid or auth.get_user_by_email(args.email).uid
        grant_admin_claim(uid)
    except auth.UserNotFoundError:
        logger.error(f"No user found for {args.uid or args.email}")
        return 1

    logger.info(f"✅ Admin role set for UID: {uid}")
    logger.info("The user must sign in again (or refresh their ID token) to pick up the claim")
    return 0


if __name__ == "__main__":
    sys.exit(main())
