"""
Errors raised by the request layer.

AuthorizationDenied is handled by a global exception handler in main.py that
picks an HTML or JSON body. MalformedBodyError is deliberately left to the
catch-all handler, which turns it into a generic 500.
"""

from typing import Optional

UNAUTHORIZED_MESSAGE = "You must be logged in to view this page"


class AuthorizationDenied(Exception):
    status_code = 401

    def __init__(self, message: str = UNAUTHORIZED_MESSAGE, session_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.session_id = session_id


class MalformedBodyError(ValueError):
    """Request body declared (or defaulted to) JSON but did not decode to an object."""
