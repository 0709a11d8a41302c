"""JSON helpers for the library cache and ``copreader convert``.

orjson is used when the ``speed`` extra is installed, otherwise the
standard library ``json`` module.
"""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json


def json_dumps(data: object, indent: bool = False) -> str:
    """Serialize a library dictionary to JSON.

    The cache stores the compact form; ``convert`` prints the indented one.
    Coptic and Arabic text is written as is, never as ``\\u`` escapes.

    Args:
        data: Output of ``Library.to_dict`` or any JSON compatible value.
        indent: Pretty print with two space indentation.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if indent else None)


def json_loads(data: str | bytes) -> object:
    """Decode a cached library entry.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object. Malformed input raises a ``ValueError``
        subclass, which the cache treats as a miss.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)
