"""
Auth Routes for the Café App
============================

Login form, login submission and the username cookie echo.

Endpoints:
----------
- GET /login: Render the login form
- POST /login: Check credentials, issue a session cookie, redirect to /
- GET /username: Echo the `cafejs_username` cookie as plain text

Login Flow:
-----------
1. The submitted username is looked up and the password compared (plaintext)
2. Unknown username or wrong password -> 401 "Invalid details!"; no cookie is
   set and no session is stored
3. Otherwise a fresh random token is stored against the user, set as the
   `cafejs_session` cookie, and the browser is redirected to / (302)

Rejected logins deliberately answer 401, not 200, so clients can tell them
apart from a rendered page.

The body may be a form post (the login page) or JSON with the same fields.
Missing fields are rejected with 422; a JSON body that does not decode
(bad syntax or bad UTF-8) gets 400.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..config import SESSION_COOKIE_NAME, USERNAME_COOKIE_NAME
from ..db import get_db
from ..schemas.auth import LoginRequest
from ..services import accounts
from ..templating import templates


logger = logging.getLogger(__name__)

# Router definition
auth_router = APIRouter(tags=["Auth"])

INVALID_LOGIN_MESSAGE = "Invalid details!"


# =============================================================================
# Helper Functions
# =============================================================================

async def read_login_credentials(request: Request) -> LoginRequest:
    """
    FastAPI dependency that parses login credentials from a JSON or form body.

    Raises:
        HTTPException (400): Body claims to be JSON but does not parse
        RequestValidationError (422): username or password missing
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError
            raise HTTPException(status_code=400, detail="Invalid JSON body")
    else:
        data = dict(await request.form())

    try:
        return LoginRequest.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


# =============================================================================
# Login Endpoints
# =============================================================================

@auth_router.get("/login", include_in_schema=False)
def login_form(request: Request):
    """Render the login form."""
    return templates.TemplateResponse(request, "login.html", {})


@auth_router.post("/login")
def login(
    credentials: LoginRequest = Depends(read_login_credentials),
    db: Session = Depends(get_db),
):
    """Check credentials and start a session."""
    user = accounts.get_user_by_username(db, credentials.username)

    if user is None or not accounts.check_password(user, credentials.password):
        logger.info("Rejected login attempt")
        return PlainTextResponse(INVALID_LOGIN_MESSAGE, status_code=401)

    session_token = accounts.generate_session_token()
    accounts.set_session(db, session_token, user.id)
    logger.info("User %s logged in", user.id)

    response = RedirectResponse(url="/", status_code=302)
    response.set_cookie(SESSION_COOKIE_NAME, session_token)
    return response


# =============================================================================
# Cookie Echo
# =============================================================================

@auth_router.get("/username", response_class=PlainTextResponse)
def echo_username_cookie(
    username: Optional[str] = Cookie(default=None, alias=USERNAME_COOKIE_NAME),
):
    """Return the `cafejs_username` cookie verbatim (empty if not sent)."""
    return PlainTextResponse(username or "")
