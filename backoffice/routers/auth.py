import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from backoffice import config
from backoffice.core.exceptions import BadRequestError, UnauthorizedError
from backoffice.middlewares.auth import is_valid_secret, security
from backoffice.schemas.auth import LoginRequest, LoginResponse, VerifyResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/auth/login", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """
    Exchange the shared backoffice password for a bearer token.

    The token is the shared secret itself; there is no per-user identity.

    Raises:
        BadRequestError: 400 if no password was sent.
        UnauthorizedError: 401 if the password does not match.
    """
    if not request.password:
        raise BadRequestError("Password is required")

    if not is_valid_secret(request.password):
        logger.warning("Rejected backoffice login attempt")
        raise UnauthorizedError("Incorrect password")

    return LoginResponse(
        success=True,
        token=config.BACKOFFICE_PASSWORD,
        message="Authentication successful",
    )


@router.get("/auth/verify", response_model=VerifyResponse)
async def verify(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
):
    """Report whether the bearer token in the request is currently valid."""
    if credentials is not None and is_valid_secret(credentials.credentials):
        return VerifyResponse(valid=True)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=VerifyResponse(valid=False).model_dump(),
    )
