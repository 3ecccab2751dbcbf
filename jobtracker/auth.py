"""Caller identity resolved by the upstream auth layer.

Tokens are verified before requests reach this service; the gateway
forwards the authenticated user id and the demo-account flag as headers.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from jobtracker.config import settings

logger = logging.getLogger(__name__)

READ_ONLY_MESSAGE = "Test user, read-only"


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller."""

    user_id: str
    read_only: bool = False


async def get_current_user(
    x_user_id: Annotated[str | None, Header()] = None,
    x_test_user: Annotated[bool, Header()] = False,
) -> CurrentUser:
    """FastAPI dependency resolving the caller from forwarded auth headers.

    Raises:
        HTTPException 401: No user id was forwarded
    """
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication invalid",
        )

    read_only = x_test_user or (
        settings.demo_user_id is not None and user_id == settings.demo_user_id
    )
    return CurrentUser(user_id=user_id, read_only=read_only)


async def require_writable_user(
    user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Dependency for mutating endpoints; the demo account may only read.

    Raises:
        HTTPException 400: Caller is the read-only demo account
    """
    if user.read_only:
        logger.info(f"Rejected write from read-only user {user.user_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=READ_ONLY_MESSAGE,
        )
    return user
