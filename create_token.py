#!/usr/bin/env python3
"""
Issue a session token for a local organizer.

The token is signed with ``SECRET_KEY`` and carries the organizer
identifier in the ``user_id`` claim, which is what the form attaches to
every created event.

Usage:
    python create_token.py --user-id b0745f32-0bbb-4674-ba6e-8b0e1d5f9294 --email ana@example.com --days 30
"""

import argparse

from event_form.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue a bearer token for the event form service.")
    ap.add_argument("--user-id", required=True, help="Organizer identifier sent as organizerId")
    ap.add_argument("--email", help="Optional subject (sub claim)")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()
    if args.days <= 0:
        ap.error("--days must be a positive number of days")

    claims = {"user_id": args.user_id}
    if args.email:
        claims["sub"] = args.email
    print(create_access_token(claims, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
