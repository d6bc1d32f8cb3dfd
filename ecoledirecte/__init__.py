"""
ecoledirecte - Python client for the EcoleDirecte school information service.
"""

__version__ = "0.1.0"

from ._body import encode_body
from ._client import EcoleDirecte
from ._exceptions import (
    CODE_MAP,
    EcoleDirecteError,
    InvalidApiUrlError,
    InvalidBodyError,
    InvalidVersionError,
    ObjectNotFoundError,
    SessionExpiredError,
    TokenInvalidError,
    TwoFactorRequiredError,
    UnauthorizedError,
    WrongCredentialsError,
)
from ._http import HTTPClient
from ._session import Session

__all__ = [
    "CODE_MAP",
    # Main client
    "EcoleDirecte",
    "EcoleDirecteError",
    "HTTPClient",
    "InvalidApiUrlError",
    "InvalidBodyError",
    "InvalidVersionError",
    "ObjectNotFoundError",
    "Session",
    "SessionExpiredError",
    "TokenInvalidError",
    "TwoFactorRequiredError",
    "UnauthorizedError",
    "WrongCredentialsError",
    "encode_body",
]
