_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote(text: str) -> str:
    """Render ``text`` as a double-quoted DOT string.

    Backslashes and double quotes are escaped, as are newline, carriage
    return and tab. Every other character is written as is.
    """
    return '"' + "".join(_ESCAPES.get(char, char) for char in text) + '"'
