"""Backslash escapes shared by the reader and the printer."""

UNESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\0": "\\0",
    "\\": "\\\\",
    '"': '\\"',
}


def unescape(text: str) -> str:
    """Decode backslash escapes; an unknown escape keeps the escaped character."""
    out = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            # lone trailing backslash
            out.append("\\")
        else:
            out.append(UNESCAPES.get(nxt, nxt))
    return "".join(out)


def escape(text: str) -> str:
    return "".join(ESCAPES.get(ch, ch) for ch in text)
