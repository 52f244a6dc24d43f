import logging
import secrets

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

security = HTTPBearer(auto_error=False)


class WriteAuthorization:
    """Decides whether a caller may write to the leaderboard.

    Without a configured token every caller may write. With one, the caller
    must present it as a bearer token.
    """

    def __init__(self, write_token: str | None = None):
        self.write_token = write_token

    def may_write(self, token: str | None) -> bool:
        if self.write_token is None:
            return True
        if token is None:
            return False
        return secrets.compare_digest(token.encode(), self.write_token.encode())


async def check_write_access(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> bool:
    """Return the write-gate decision for this request.

    Args:
        request (Request): carries the app's WriteAuthorization on its state
        credentials (HTTPAuthorizationCredentials, optional): bearer token, if sent

    Returns:
        bool: True if the caller may write to the leaderboard
    """
    write_authorization: WriteAuthorization = request.app.state.write_authorization
    token = credentials.credentials if credentials is not None else None
    allowed = write_authorization.may_write(token)
    if not allowed:
        logging.info("Leaderboard write refused: missing or invalid bearer token")
    return allowed
