"""Jinja filters that quote values for the languages the catalog emits."""

import shlex

# Escapes shared by single- and double-quoted Groovy strings; backslash first
_GROOVY_ESCAPES = (("\\", "\\\\"), ("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t"))


def _escape_groovy(text: str) -> str:
    for raw, escaped in _GROOVY_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def groovy_string(value: object) -> str:
    """Single-quoted Groovy literal; single-quoted strings are never interpolated."""
    text = _escape_groovy(str(value)).replace("'", "\\'")
    return f"'{text}'"


def groovy_gstring(value: object) -> str:
    """Escapes text placed inside a double-quoted Groovy string so it is not interpolated."""
    return _escape_groovy(str(value)).replace('"', '\\"').replace("$", "\\$")


def groovy_block(value: str) -> str:
    """Escapes text for the body of a Groovy ''' block so the shell receives it verbatim."""
    if "'''" in value:
        raise ValueError("Script bodies cannot contain a triple single quote")
    return value.replace("\\", "\\\\")


def shell_quote(value: object) -> str:
    return shlex.quote(str(value))


FILTERS = {
    "groovy_string": groovy_string,
    "groovy_gstring": groovy_gstring,
    "groovy_block": groovy_block,
    "shell_quote": shell_quote,
}
