#!/usr/bin/env python3
"""
Mint an access token for a user id, for local development.

Sign-in is handled outside the API, so this is the quickest way to call
authenticated endpoints by hand.

Usage:
    python scripts/issue_token.py <user_id> [expires_minutes]
"""
import sys

from green.core.security import create_access_token


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    expires = int(sys.argv[2]) if len(sys.argv) > 2 else None
    print(create_access_token(sys.argv[1], expires))


if __name__ == "__main__":
    main()
