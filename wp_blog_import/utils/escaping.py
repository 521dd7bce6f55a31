from __future__ import annotations

import html
import re
from typing import Union

# A blank line in a WordPress body, with or without carriage returns.
_BLANK_LINE = re.compile(r"(\r)?\n(\r)?\n")
_ESCAPED_BREAK = "\r\n&lt;br /&gt;&lt;br /&gt;\r\n"


class PreEscaped(str):
    """Text that already contains valid entity references.

    WordPress stores category and tag names entity-escaped inside CDATA, so
    they are written to the import document as-is.  :func:`escape` returns
    instances of this class unchanged.
    """


def escape(value: Union[str, bytes, None]) -> str:
    """Escape ``& < > " '`` in ``value`` for the import document.

    Existing entity references are escaped again: ``&amp;`` becomes
    ``&amp;amp;``.  Bytes are decoded as UTF-8 and ``None`` reads as an
    empty string.  :class:`PreEscaped` values are returned untouched.
    """
    if value is None:
        return ""
    if isinstance(value, PreEscaped):
        return value
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    return html.escape(str(value), quote=True)


def paragraph_breaks(escaped_body: str) -> str:
    """Replace blank lines in an escaped body with an escaped double ``<br />``.

    Blank lines are paragraph breaks in WordPress; the importer renders the
    body as foreign HTML where they would otherwise collapse.
    """
    return _BLANK_LINE.sub(_ESCAPED_BREAK, escaped_body)
