import jwt
import os
from datetime import datetime, timedelta, timezone
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET")

if not SECRET_KEY:
    raise ValueError("JWT_SECRET environment variable is not set")

ALGORITHM = "HS256"
EXPIRES_IN = int(os.getenv("JWT_EXPIRES_IN", "3600"))


class TokenInvalidError(Exception):
    """Token signature, format or claims are not acceptable"""


class TokenExpiredError(TokenInvalidError):
    """Token was valid but its exp claim has passed"""


def create_jwt(claims: dict, expires_in: Optional[int] = None) -> str:
    """
    Sign a JWT carrying the given claims

    Args:
        claims: Identity claims to embed (e.g. {"username": ...})
        expires_in: Validity window in seconds, defaults to JWT_EXPIRES_IN

    Returns:
        Encoded JWT string
    """
    now = datetime.now(tz=timezone.utc)
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + timedelta(seconds=EXPIRES_IN if expires_in is None else expires_in)
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def verify_jwt(token: str) -> dict:
    """
    Verify JWT token and return payload

    Args:
        token: JWT token string

    Returns:
        Decoded payload

    Raises:
        TokenExpiredError: If the exp claim has passed
        TokenInvalidError: If the token is malformed, tampered or lacks required claims
    """
    try:
        return jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "username"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError(str(exc)) from exc
    except jwt.InvalidTokenError as exc:
        raise TokenInvalidError(str(exc)) from exc


def get_username_from_token(token: str) -> str:
    """Extract the username claim from a verified JWT"""
    return verify_jwt(token)["username"]
