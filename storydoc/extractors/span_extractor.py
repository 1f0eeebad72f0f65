"""
Escape-aware extraction of quoted spans.

Long-form text in stories files (component descriptions, API docs) is written
as backtick template literals that may themselves contain escaped backticks,
e.g. fenced code blocks written as \\`\\`\\`tsx.
"""

import re
from typing import Optional

BACKTICK = '`'

QUOTE_CHARS = ('"', "'")

_EDGE_QUOTES = re.compile(r'^["\']|["\']$')


def count_preceding_backslashes(text: str, pos: int) -> int:
    """Count consecutive backslashes immediately before `pos`."""
    count = 0
    check = pos - 1
    while check >= 0 and text[check] == '\\':
        count += 1
        check -= 1
    return count


def extract_delimited(text: str, start: int, delimiter: str = BACKTICK) -> str:
    """
    Extract the text between an opening delimiter and its unescaped closer.

    A delimiter preceded by an odd number of backslashes is escaped: it is kept
    verbatim (along with its backslashes) and scanning continues. If no
    unescaped closer exists, everything after the opener is returned.

    Args:
        text: Source text
        start: Index of the opening delimiter
        delimiter: Delimiter character (default: backtick)

    Returns:
        Trimmed text between the delimiters
    """
    chars = []
    pos = start + 1

    while pos < len(text):
        char = text[pos]
        if char == delimiter and count_preceding_backslashes(text, pos) % 2 == 0:
            break
        chars.append(char)
        pos += 1

    return ''.join(chars).strip()


def extract_after_key(text: str, key: str, delimiter: str = BACKTICK) -> Optional[str]:
    """
    Find `key`, then the first `delimiter` after it, and extract that span.

    Returns None when either the key or the delimiter is missing.
    """
    key_pos = text.find(key)
    if key_pos == -1:
        return None

    delimiter_pos = text.find(delimiter, key_pos)
    if delimiter_pos == -1:
        return None

    return extract_delimited(text, delimiter_pos, delimiter)


def strip_quotes(value: str) -> str:
    """
    Remove surrounding quotes from a literal.

    A matching pair of double or single quotes is stripped exactly once.
    Otherwise any one leading and one trailing quote character is dropped, so
    mismatched quoting like `'text"` still comes out clean.
    """
    for quote in QUOTE_CHARS:
        if len(value) >= 2 and value.startswith(quote) and value.endswith(quote):
            return value[1:-1]
    return _EDGE_QUOTES.sub('', value)
