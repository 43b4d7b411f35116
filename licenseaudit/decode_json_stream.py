"""Logic for decoding the concatenated JSON objects printed by go list -json."""

import json
from collections.abc import Iterator
from typing import Any

_decoder = json.JSONDecoder()


def decode_json_stream(text: str) -> Iterator[dict[str, Any]]:
    """Yield each top-level JSON object in text, in order.

    Raises ValueError on malformed input or a non-object value.
    """
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return
        obj, pos = _decoder.raw_decode(text, pos)
        if not isinstance(obj, dict):
            msg = f"expected a JSON object, got {type(obj).__name__}"
            raise ValueError(msg)
        yield obj
