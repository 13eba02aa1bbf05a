import logging

from errors import InvalidCredentials, UsernameTaken
from models import User
from stores.users import UserStore
from utils.jwt import create_jwt
from utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Signup and signin on top of a user store"""

    def __init__(self, users: UserStore):
        self.users = users

    def sign_up(self, username: str, password: str) -> None:
        user = User(username=username, password_hash=hash_password(password))
        try:
            self.users.add(user)
        except UsernameTaken:
            logger.info("Signup rejected, username %s already exists", username)
            raise
        logger.info("Registered user %s (%s)", username, user.id)

    def sign_in(self, username: str, password: str) -> str:
        """
        Verify credentials and issue an access token

        Unknown usernames and wrong passwords raise the same
        InvalidCredentials error.
        """
        user = self.users.get_by_username(username)

        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed signin for %s", username)
            raise InvalidCredentials()

        logger.info("Signin: %s (%s)", user.username, user.id)
        return create_jwt({"username": user.username})
