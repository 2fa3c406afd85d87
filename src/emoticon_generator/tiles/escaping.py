"""
escaping.py.

Does: Quote/unquote characters for single-quoted char literals ('x') in the
      pasted table initializers. Only ' and \\ need a leading backslash.
"""

__all__ = ["CHARS_NEEDING_ESCAPE", "escape_char", "unescape_char"]

CHARS_NEEDING_ESCAPE = frozenset({"'", "\\"})


def escape_char(ch: str) -> str:
    """Does: Prefix ' and \\ with a backslash; other characters pass through."""
    return f"\\{ch}" if ch in CHARS_NEEDING_ESCAPE else ch


def unescape_char(literal: str) -> str:
    """Does: Inverse of escape_char (drops one leading backslash of an escaped char)."""
    if len(literal) == 2 and literal[0] == "\\" and literal[1] in CHARS_NEEDING_ESCAPE:
        return literal[1]
    return literal
