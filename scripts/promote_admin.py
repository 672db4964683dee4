#!/usr/bin/env python3
"""
Promote an existing user to admin.

Usage:
    python scripts/promote_admin.py someone@example.com

Promotion over HTTP needs an admin token, so the first admin is created here.
"""
import logging
import sys

from bistro.config import settings
from bistro.repositories.user import UserRepository
from bistro_common.logging import setup_logging
from bistro_common.mongo import mongo_database

logger = logging.getLogger("promote_admin")


def promote(email: str) -> int:
    with mongo_database(
        settings.mongodb_uri,
        settings.MONGODB_DB_NAME,
        server_api_version=settings.MONGODB_SERVER_API_VERSION,
    ) as db:
        result = UserRepository(db).promote_by_email(email)

    if result.matched_count == 0:
        logger.error("No user with email %s", email)
        return 1
    logger.info("Promoted %s to admin", email)
    return 0


def main():
    if len(sys.argv) != 2:
        print("Usage: promote_admin.py <email>")
        return 2
    setup_logging(settings.LOG_LEVEL)
    return promote(sys.argv[1])


if __name__ == "__main__":
    sys.exit(main())
