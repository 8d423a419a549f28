# api/identity.py
# Works out which user a request acts as.
#
# There is no authentication: a request may name a user with the X-User-Id
# header, otherwise it acts as the configured default user (or default admin
# for moderation endpoints). Swap these dependencies for real authentication
# without touching the business logic, which only ever sees a user id.

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from app import crud
from app import models
from app.core.config import settings
from app.db.session import get_db

# Get a logger instance
logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"


def _resolve_user(db: Session, user_id: Optional[UUID], fallback_username: str) -> models.User:
    if user_id is not None:
        user = crud.get_user(db, user_id=user_id)
    else:
        user = crud.get_user_by_username(db, username=fallback_username)

    if user is None:
        logger.error(f"Could not resolve user (id={user_id}, fallback={fallback_username})")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not resolve user",
        )
    if not user.is_active:
        logger.warning(f"User {user.username} is inactive")
        raise HTTPException(status_code=400, detail="Inactive user")
    return user


async def get_current_user(
    request: Request,
    x_user_id: Optional[UUID] = Header(default=None, alias=USER_ID_HEADER),
    db: Session = Depends(get_db),
):
    """
    The user named by the X-User-Id header, or the default user.
    """
    user = _resolve_user(db, x_user_id, settings.DEFAULT_USERNAME)
    request.state.user = user
    logger.debug(f"Acting as user: {user.username}")
    return user


async def get_current_admin_user(
    request: Request,
    x_user_id: Optional[UUID] = Header(default=None, alias=USER_ID_HEADER),
    db: Session = Depends(get_db),
):
    """
    Like get_current_user, but falls back to the default admin and requires admin rights.
    """
    user = _resolve_user(db, x_user_id, settings.DEFAULT_ADMIN_USERNAME)
    if not user.is_admin:
        logger.warning(f"User {user.username} attempted an admin action")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    request.state.user = user
    return user
