"""Documents resource — binary downloads through the blob transport."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from .._body import encode_body

if TYPE_CHECKING:
    from .._http import HTTPClient


class Documents:
    """client.documents — attachments, report cards, pictures."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def download(self, file_id: int | str, file_type: str = "") -> bytes:
        query = urlencode({"verbe": "get", "fichierId": file_id, "leTypeDeFichier": file_type})
        return self._http.blob(
            f"/v3/telechargement.awp?{query}", encode_body({"forceDownload": 0})
        )

    def fetch(self, url: str) -> bytes:
        """GET an absolute URL (e.g. a photo link found in a payload)."""
        return self._http.blob(url, "", is_absolute=True, method="GET")
