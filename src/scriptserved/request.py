from __future__ import annotations

import os

MAX_PATH_LENGTH = 256

_METHOD_MARKER = b"GET "
_ENCODED_SPACE = b"%20"


def parse_request_path(raw: bytes, max_length: int = MAX_PATH_LENGTH) -> str:
    start = raw.find(_METHOD_MARKER)
    if start == -1:
        return "/"
    start += len(_METHOD_MARKER)
    end = raw.find(b" ", start)
    if end == -1:
        return "/"

    # Truncated as bytes; fsdecode lets os.stat/open see the client's bytes.
    target = raw[start:end][: max(0, max_length - 1)]
    if not target:
        return "/"
    return os.fsdecode(decode_spaces(target))


def decode_spaces(target: bytes) -> bytes:
    parts = bytearray()
    index = 0
    while index < len(target):
        if target.startswith(_ENCODED_SPACE, index):
            parts.extend(b" ")
            index += len(_ENCODED_SPACE)
        else:
            parts.append(target[index])
            index += 1
    return bytes(parts)
