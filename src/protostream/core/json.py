"""JSON encoding for snapshots and inline script values."""

from typing import Any
import json

import msgspec
import orjson


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: indent for pretty output

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Integers outside 64-bit range and similar edge cases
            pass

        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Pretty-printed output or last resort
    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)


def script_literal(value: Any) -> str:
    """
    Encode a value for embedding inside an inline <script> element.

    The result is valid JSON (and so a valid JS expression) that cannot close
    the surrounding script tag or open an HTML comment.
    """
    encoded = safe_json_dumps(value)
    return (
        encoded.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


__all__ = ["safe_json_dumps", "script_literal"]
