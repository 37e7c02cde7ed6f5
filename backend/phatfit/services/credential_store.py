# phatfit/services/credential_store.py
"""
Credential store: persisted user accounts and their embedded record history.

The store is an explicit handle created by the application factory and shared
with request handlers through dependencies. It owns the database lifecycle
(``open``/``close``) and is the only place that talks to the ORM.

Consistency is delegated to the database:
- email uniqueness: explicit lookup before insert, backed by the unique index
- record append: read-modify-write of the user row inside a transaction, with
  ``SELECT ... FOR UPDATE`` on backends that support row locks
"""
import logging
import uuid
from typing import Optional

from tortoise.exceptions import BaseORMException, IntegrityError
from tortoise.transactions import in_transaction

from phatfit.core.db import close_db, init_db
from phatfit.core.errors import DuplicateEmailError, NotFoundError, StoreError
from phatfit.models.user import User

logger = logging.getLogger("uvicorn.error")


class UserStore:
    def __init__(self, db_url: str, generate_schemas: bool = False):
        self.db_url = db_url
        self.generate_schemas = generate_schemas

    async def open(self) -> None:
        await init_db(self.db_url, generate_schemas=self.generate_schemas)

    async def close(self) -> None:
        await close_db()

    async def create_user(self, email: str, password_hash: str, name: str) -> User:
        """
        Persist a new user with an empty record list.

        Raises:
            DuplicateEmailError: If the email is already registered (either found
                up front or rejected by the unique index on insert)
            StoreError: On any other database failure
        """
        try:
            if await User.filter(email=email).exists():
                raise DuplicateEmailError()
            return await User.create(email=email, password_hash=password_hash, name=name, records=[])
        except IntegrityError as exc:
            # Lost a race with a concurrent registration for the same email
            raise DuplicateEmailError() from exc
        except BaseORMException as exc:
            logger.exception("[store] create_user failed")
            raise StoreError(on_write=True) from exc

    async def find_by_email(self, email: str) -> Optional[User]:
        try:
            return await User.get_or_none(email=email)
        except BaseORMException as exc:
            logger.exception("[store] find_by_email failed")
            raise StoreError() from exc

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Look up a user by id; ids that are not UUIDs simply match nobody."""
        try:
            pk = uuid.UUID(str(user_id))
        except ValueError:
            return None
        try:
            return await User.get_or_none(id=pk)
        except BaseORMException as exc:
            logger.exception("[store] find_by_id failed")
            raise StoreError() from exc

    async def append_record(self, user_id: str, record: dict) -> list[dict]:
        """
        Append one record to a user's history and return the full updated list.

        Raises:
            NotFoundError: If the user does not exist
            StoreError: If the write fails
        """
        try:
            pk = uuid.UUID(str(user_id))
        except ValueError:
            raise NotFoundError("User") from None
        try:
            async with in_transaction():
                user = await User.select_for_update().get_or_none(id=pk)
                if user is None:
                    raise NotFoundError("User")
                user.records = [*(user.records or []), record]
                await user.save(update_fields=["records"])
        except BaseORMException as exc:
            logger.exception("[store] append_record failed for user %s", pk)
            raise StoreError(on_write=True) from exc
        return user.records
