"""Escape sequences of the tiny v2 format."""

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r", "t": "\t", "0": "\0"}


def escape(text: str) -> str:
    """Escape characters that would break a tab separated line."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape(text: str) -> str:
    """Reverse ``escape``; raises ValueError on an unknown escape sequence."""
    if "\\" not in text:
        return text
    out = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        if nxt not in _UNESCAPES:
            msg = f"invalid escape sequence \\{nxt} in {text!r}"
            raise ValueError(msg)
        out.append(_UNESCAPES[nxt])
    return "".join(out)
