import secrets
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from backoffice import config
from backoffice.core.exceptions import UnauthorizedError

security = HTTPBearer(auto_error=False)


def is_valid_secret(candidate: Optional[str]) -> bool:
    """Constant-time comparison against the shared backoffice password."""
    if not candidate or not config.BACKOFFICE_PASSWORD:
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"), config.BACKOFFICE_PASSWORD.encode("utf-8")
    )


async def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    if credentials is None or not is_valid_secret(credentials.credentials):
        raise UnauthorizedError("Unauthorized. Invalid or missing token.")
