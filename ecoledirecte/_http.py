"""Authenticated request core: URL templating, token header, response interpretation."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import Any, Literal

import requests

from ._constants import API_URL, API_VERSION, DEFAULT_HEADERS, LOADING_PAGE_MARKER, TOKEN_HEADER
from ._exceptions import CODE_MAP, InvalidApiUrlError
from ._session import Session

logger = logging.getLogger(__name__)


@dataclass
class JsonBody:
    """Response text that started with ``{`` and parsed as a JSON envelope."""

    envelope: dict[str, Any]

    @property
    def value(self) -> dict[str, Any]:
        return self.envelope


@dataclass
class TextBody:
    """Any other response text, kept verbatim."""

    text: str

    @property
    def value(self) -> str:
        return self.text


def parse_body(text: str) -> JsonBody | TextBody:
    """Split raw response text into a JSON envelope or plain text.

    Malformed JSON raises ``json.JSONDecodeError`` unchanged.
    """
    if text.startswith("{"):
        return JsonBody(json.loads(text))
    return TextBody(text)


def _coerce_code(code: Any) -> int | None:
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, float) and code.is_integer():
        return int(code)
    if isinstance(code, str) and code.strip().lstrip("-").isdigit():
        return int(code)
    return None


def raise_for_code(parsed: JsonBody | TextBody) -> None:
    """Raise the first matching typed error for a parsed response, if any."""
    if isinstance(parsed, TextBody):
        if LOADING_PAGE_MARKER in parsed.text:
            logger.debug("Loading page received instead of JSON")
            raise InvalidApiUrlError.drop()
        return

    code = _coerce_code(parsed.envelope.get("code"))
    exc_cls = CODE_MAP.get(code) if code is not None else None
    if exc_cls is None:
        return
    logger.debug("Response code %s mapped to %s", code, exc_cls.__name__)
    raise exc_cls.drop(parsed.envelope.get("message"), code=code)


class HTTPClient:
    """POST-only transport bound to one Session.

    ``get``/``post``/``put``/``delete`` only change the ``verbe`` marker written
    into the query string; every call goes out as an HTTP POST.
    """

    def __init__(
        self,
        session: Session,
        base_url: str = API_URL,
        version: str = API_VERSION,
        timeout: float | None = None,
    ):
        self.session = session
        self._http = requests.Session()
        self._base_url = base_url.rstrip("/")
        self._version = version
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def version(self) -> str:
        return self._version

    def close(self) -> None:
        self._http.close()

    # Token gates. The binary and JSON paths deliberately use different
    # conditions; keep them separate.

    def _sends_token_with_blob(self) -> bool:
        return self.session.is_logged_in

    def _sends_token_with_request(self) -> bool:
        return self.session.has_token

    def _headers(self, with_token: bool) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if with_token and self.session.token is not None:
            headers[TOKEN_HEADER] = self.session.token
        return headers

    def build_url(self, verb: str, path: str, params: str | None = None) -> str:
        """Append the ``verbe`` and ``v`` markers (plus extra params) to ``path``."""
        separator = "&" if "?" in path else "?"
        extra = f"&{params}" if params else ""
        return f"{self._base_url}{path}{separator}verbe={verb}&v={self._version}{extra}"

    def blob(
        self,
        url: str,
        body: str = "",
        is_absolute: bool = False,
        method: Literal["GET", "POST"] = "POST",
    ) -> bytes:
        """Fetch a binary payload. No verb templating, no error interpretation."""
        if method not in ("GET", "POST"):
            raise ValueError(f"blob() only supports GET and POST, got {method!r}")
        final_url = url if is_absolute else f"{self._base_url}{url}"
        with_token = self._sends_token_with_blob()
        logger.debug("%s %s (blob, token=%s)", method, final_url, with_token)
        resp = self._http.request(
            method,
            final_url,
            headers=self._headers(with_token),
            data=body.encode("utf-8") if method == "POST" else None,
            timeout=self._timeout,
        )
        return resp.content

    def get(
        self, path: str, body: str, params: str | None = None, ignore_errors: bool = False
    ) -> Any:
        return self.request(self.build_url("get", path, params), body, ignore_errors)

    def post(
        self, path: str, body: str, params: str | None = None, ignore_errors: bool = False
    ) -> Any:
        return self.request(self.build_url("post", path, params), body, ignore_errors)

    def put(
        self, path: str, body: str, params: str | None = None, ignore_errors: bool = False
    ) -> Any:
        return self.request(self.build_url("put", path, params), body, ignore_errors)

    def delete(
        self, path: str, body: str, params: str | None = None, ignore_errors: bool = False
    ) -> Any:
        return self.request(self.build_url("delete", path, params), body, ignore_errors)

    def request(self, url: str, body: str, ignore_errors: bool = False) -> Any:
        """POST ``body`` to a fully built URL and interpret the answer.

        Returns the parsed envelope (a dict) or the raw text. Unless
        ``ignore_errors`` is set, mapped codes and the loading page raise a
        typed error; any other code is returned as is.
        """
        with_token = self._sends_token_with_request()
        logger.debug("POST %s (token=%s)", url, with_token)
        resp = self._http.post(
            url,
            headers=self._headers(with_token),
            data=body.encode("utf-8"),
            timeout=self._timeout,
        )
        parsed = parse_body(resp.content.decode("utf-8", errors="replace"))
        logger.debug("Parsed response as %s", type(parsed).__name__)
        if not ignore_errors:
            raise_for_code(parsed)
        return parsed.value
