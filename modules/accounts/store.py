"""User store backed by the ``users`` table."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from extensions import db
from models import User

from .errors import StoreError, UsernameTakenError

logger = logging.getLogger(__name__)


class UserStore:
    """The two operations the account handlers need from the database."""

    def __init__(self, session: Session | None = None) -> None:
        self.session = session or db.session

    def find_by_username(self, username: str) -> User | None:
        """Return the user only when exactly one row matches."""
        query = db.select(User).filter_by(username=username).limit(2)
        try:
            rows = self.session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("User lookup failed")
            raise StoreError() from exc
        return rows[0] if len(rows) == 1 else None

    def find_by_id(self, user_id: int) -> User | None:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("User lookup by id failed")
            raise StoreError() from exc

    def insert_user(self, username: str, password_hash: str, email: str) -> int:
        """Insert a user and return its id.

        The unique constraint on ``username`` decides whether the name is
        taken; a violation raises ``UsernameTakenError``.
        """
        user = User(username=username, password=password_hash, email=email)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.info("Username %r was taken before insert", username)
            raise UsernameTakenError() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("User insert failed")
            raise StoreError() from exc
        return user.id
