"""
Bootstrap the first ADMIN account.

Invitations can only be issued by an existing user, so a fresh deployment
needs one account created out of band:

    python seed_admin.py admin@example.com 'S3curePassw0rd' "Site Admin"
"""

import argparse
import asyncio
import logging

from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.services.credential_store import SqlCredentialStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import AsyncSessionLocal, engine
from src.domain.entities import User, UserRole, UserStatus

logger = logging.getLogger("seed_admin")


async def seed_admin(email: str, password: str, name: str) -> bool:
    email = email.strip().lower()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        credential_store = SqlCredentialStore(session)
        created = await credential_store.create_credential(email, password)
        if created.is_err():
            logger.error("Could not create credential: %s", created.error.message)
            return False

        async with SqlAlchemyUnitOfWork(session) as uow:
            try:
                await uow.users.create(
                    User(
                        id=created.value,
                        email=email,
                        name=name,
                        role=UserRole.ADMIN,
                        permissions=[],
                        status=UserStatus.ACTIVE,
                    )
                )
                await uow.commit()
            except Exception:
                logger.exception("Could not create admin profile; removing credential")
                await uow.rollback()
                await credential_store.delete_credential(created.value)
                return False

    logger.info("Admin %s created", email)
    return True


def main():
    parser = argparse.ArgumentParser(description="Create the initial ADMIN user")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("name", nargs="?", default="Administrator")
    args = parser.parse_args()

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    ok = asyncio.run(seed_admin(args.email, args.password, args.name))
    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
