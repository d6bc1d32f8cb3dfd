"""Request body encoding."""

import json
from typing import Any


def encode_body(data: dict[str, Any] | None = None) -> str:
    """Serialize a mapping into the ``data=<json>`` form body the API expects."""
    return "data=" + json.dumps(data or {}, separators=(",", ":"))
