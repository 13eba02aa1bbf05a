import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from errors import StorageUnavailable, UsernameTaken
from models import User

logger = logging.getLogger(__name__)


class UserStore:
    """Credential store backed by the users table"""

    def __init__(self, session: Session):
        self.session = session

    def get_by_username(self, username: str) -> Optional[User]:
        try:
            return self.session.exec(select(User).where(User.username == username)).first()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to look up user %s", username)
            raise StorageUnavailable() from exc

    def add(self, user: User) -> User:
        """
        Insert a new user

        Raises:
            UsernameTaken: If the unique index on username rejects the row
            StorageUnavailable: On any other database failure
        """
        username = user.username
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError:
            self.session.rollback()
            raise UsernameTaken()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to insert user %s", username)
            raise StorageUnavailable() from exc

        return user

    def delete(self, user: User) -> None:
        """Remove a user account; its tokens stop resolving immediately"""
        user_id = user.id
        try:
            self.session.delete(user)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to delete user %s", user_id)
            raise StorageUnavailable() from exc
