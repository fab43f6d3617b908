"""
Login Schemas for the Café App
==============================

POST /login accepts the same two fields either as a form post (the login page)
or as a JSON body, so the credentials are modelled once here and validated
from whichever body arrives.

Usage:
------
    credentials = LoginRequest.model_validate({"username": "matthew", "password": "latte"})
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """
    Credentials submitted to POST /login.

    Attributes:
        username: Account name to look up
        password: Plaintext password to compare
    """
    username: str
    password: str
