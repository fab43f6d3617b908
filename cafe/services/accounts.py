"""
Account and Session Service for the Café App
============================================

Looks up users and stores login sessions.

Session Model:
--------------
A session is a random token mapped to a user id in the `sessions` table.
The token is 16 bytes from the `secrets` module, base64-encoded (24 chars),
and travels in the `cafejs_session` cookie. Sessions have no expiry and are
never rotated or revoked; a user who logs in twice simply holds two valid
tokens.

Passwords are stored and compared as plaintext.

Usage:
------
    from cafe.services import accounts

    user = accounts.get_user_by_username(db, "matthew")
    token = accounts.generate_session_token()
    accounts.set_session(db, token, user.id)

    # Later, on another request
    user = accounts.get_user_by_session_token(db, request_cookie)
"""

import base64
import logging
import secrets
from typing import Optional

from sqlalchemy.orm import Session

from ..config import SESSION_TOKEN_BYTES
from ..models import User, UserSession


logger = logging.getLogger(__name__)


def generate_session_token() -> str:
    """Return a new session token: SESSION_TOKEN_BYTES random bytes, base64-encoded."""
    return base64.b64encode(secrets.token_bytes(SESSION_TOKEN_BYTES)).decode("ascii")


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Return the user with this username, or None."""
    return db.query(User).filter(User.username == username).first()


def get_user_by_session_token(db: Session, token: Optional[str]) -> Optional[User]:
    """
    Resolve a session token to its user.

    Returns None when the token is missing/empty or not a known session.
    """
    if not token:
        return None

    return (
        db.query(User)
        .join(UserSession, UserSession.user_id == User.id)
        .filter(UserSession.token == token)
        .first()
    )


def set_session(db: Session, token: str, user_id: int) -> UserSession:
    """
    Persist a session token for a user and commit.

    A row that already holds the same token is overwritten.
    """
    session_row = db.merge(UserSession(token=token, user_id=user_id))
    db.commit()
    logger.debug("Stored session for user %s", user_id)
    return session_row


def check_password(user: User, password: str) -> bool:
    """Plaintext comparison of a submitted password against the stored one."""
    return secrets.compare_digest(
        user.password.encode("utf-8"),
        password.encode("utf-8"),
    )
