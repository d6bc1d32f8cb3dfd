"""Typed error hierarchy mapping the numeric codes found in EcoleDirecte JSON bodies."""

from __future__ import annotations


class EcoleDirecteError(Exception):
    """Base exception for all ecoledirecte client errors."""

    default_message = "EcoleDirecte request failed"
    carries_message = False

    def __init__(self, message: str | None = None, code: int | None = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code

    @classmethod
    def drop(cls, message: str | None = None, *, code: int | None = None) -> EcoleDirecteError:
        """Build the error as raised by the request core.

        Only kinds with ``carries_message`` keep the server-supplied message;
        the others always use their fixed description.
        """
        if not cls.carries_message:
            message = None
        return cls(message, code=code)


class InvalidApiUrlError(EcoleDirecteError):
    """Loading page returned instead of JSON: the base URL or path is wrong."""

    default_message = "Invalid API URL: the server answered with a loading page"


class SessionExpiredError(EcoleDirecteError):
    """525 / 526 — the session must be re-established."""

    default_message = "Session expired"


class TokenInvalidError(EcoleDirecteError):
    """520 — the token is unknown or revoked."""

    default_message = "Invalid token"


class WrongCredentialsError(EcoleDirecteError):
    """505 — wrong username or password."""

    default_message = "Wrong credentials"


class InvalidBodyError(EcoleDirecteError):
    """512 — the request body could not be understood."""

    default_message = "Invalid request body"


class UnauthorizedError(EcoleDirecteError):
    """403 — access refused, message comes from the server."""

    default_message = "Unauthorized"
    carries_message = True


class ObjectNotFoundError(EcoleDirecteError):
    """210 — the requested object does not exist, message comes from the server."""

    default_message = "Object not found"
    carries_message = True


class TwoFactorRequiredError(EcoleDirecteError):
    """250 — an additional authentication step is required."""

    default_message = "Two-factor authentication required"


class InvalidVersionError(EcoleDirecteError):
    """517 — the protocol version marker is no longer accepted."""

    default_message = "Invalid API version"


# Checked in this order; first match wins.
CODE_MAP: dict[int, type[EcoleDirecteError]] = {
    525: SessionExpiredError,
    526: SessionExpiredError,
    520: TokenInvalidError,
    505: WrongCredentialsError,
    512: InvalidBodyError,
    403: UnauthorizedError,
    210: ObjectNotFoundError,
    250: TwoFactorRequiredError,
    517: InvalidVersionError,
}
