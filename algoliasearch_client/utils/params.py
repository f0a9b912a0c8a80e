"""Search parameter serialization shared by requests and secured keys."""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import quote

# Characters left alone by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, (str, int, float)) and not isinstance(item, bool) for item in value):
            return ",".join(str(item) for item in value)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def get_search_params(args: Mapping[str, Any] | None, params: str = "") -> str:
    """Append ``args`` to ``params`` as an encoded query string.

    Keys keep their mapping order and ``None`` values are skipped. Flat lists
    are comma-joined, nested structures are sent as compact JSON.
    """

    if args is None:
        return params

    for key, value in args.items():
        if key is None or value is None:
            continue
        if params:
            params += "&"
        params += f"{key}={encode_uri_component(_render_value(value))}"
    return params


__all__ = ["encode_uri_component", "get_search_params"]
