"""
JSON with comments (tsconfig.json / jsconfig.json style).
"""

from __future__ import annotations

import json
import re
from typing import Any

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


def strip_comments(text: str) -> str:
    """
    Blank out ``//`` and ``/* */`` comments outside string literals.

    Comment characters are replaced by spaces and newlines are kept, so
    JSON error offsets still point at the original text.
    """
    out = list(text)
    n = len(text)
    i = 0

    def blank(start: int, end: int) -> None:
        for j in range(start, end):
            if text[j] not in "\r\n":
                out[j] = " "

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if ch == '"':
            i += 1
            while i < n and text[i] != '"':
                i += 2 if text[i] == "\\" else 1
            i += 1
        elif ch == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            blank(i, end)
            i = end
        elif ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            blank(i, end)
            i = end
        else:
            i += 1

    return "".join(out)


def load_jsonc(text: str) -> Any:
    """
    Parse JSON with comments and trailing commas.

    Raises:
        json.JSONDecodeError: If the remaining text is not valid JSON
    """
    return json.loads(_TRAILING_COMMA_RE.sub(r"\1", strip_comments(text)))
