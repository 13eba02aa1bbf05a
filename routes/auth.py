from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from database import get_session
from schemas import ApiResponse, AuthCredentials, SignInRequest, TokenResponse
from services.auth import AuthService
from stores.users import UserStore

router = APIRouter()


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(UserStore(session))


# Plain def handlers: bcrypt runs in the threadpool, not on the event loop


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(
    credentials: AuthCredentials,
    service: AuthService = Depends(get_auth_service)
) -> ApiResponse:
    """
    Register a new user

    Args:
        credentials: Username and password
        service: Auth service

    Returns:
        ApiResponse with no data; the caller signs in separately
    """
    service.sign_up(credentials.username, credentials.password)

    return ApiResponse(success=True)


@router.post("/signin")
def sign_in(
    credentials: SignInRequest,
    service: AuthService = Depends(get_auth_service)
) -> ApiResponse:
    """
    Exchange credentials for a bearer token

    Args:
        credentials: Username and password
        service: Auth service

    Returns:
        ApiResponse with the access token
    """
    token = service.sign_in(credentials.username, credentials.password)

    return ApiResponse(
        success=True,
        data=TokenResponse(access_token=token).model_dump()
    )
