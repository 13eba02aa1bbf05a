import logging

from fastapi import Depends, Request
from sqlmodel import Session

from database import get_session
from errors import Unauthenticated
from models import User
from stores.users import UserStore
from utils.jwt import TokenInvalidError, get_username_from_token

logger = logging.getLogger(__name__)


async def verify_jwt_middleware(request: Request, session: Session = Depends(get_session)) -> User:
    """
    Middleware to verify JWT token in Authorization header

    Args:
        request: FastAPI request object
        session: Database session

    Returns:
        The user the token was issued to

    Raises:
        Unauthenticated: If the token is missing, invalid or expired, or its user no longer exists
    """
    auth_header = request.headers.get("Authorization")

    if not auth_header:
        logger.debug("Rejected %s: missing Authorization header", request.url.path)
        raise Unauthenticated()

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.debug("Rejected %s: malformed Authorization header", request.url.path)
        raise Unauthenticated()

    try:
        username = get_username_from_token(parts[1])
    except TokenInvalidError as exc:
        # Expired and forged tokens look the same to the caller
        logger.debug("Rejected %s: %s", request.url.path, exc)
        raise Unauthenticated()

    user = UserStore(session).get_by_username(username)
    if user is None:
        logger.debug("Rejected %s: token user %s no longer exists", request.url.path, username)
        raise Unauthenticated()

    # Attach user to request state
    request.state.user = user
    return user
