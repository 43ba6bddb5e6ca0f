"""Text processing utilities for Rayas.

Example:
    >>> from rayas.utils.text import escape_text
    >>> escape_text('a < "b"')
    'a &lt; &quot;b&quot;'
"""

from __future__ import annotations

import html as html_module
import re

# Characters allowed in a language identifier that is emitted unescaped
# inside ``class=language-...``.
_SAFE_IDENTIFIER = re.compile(r"[A-Za-z0-9_+#.\-]+")


def escape_text(text: str) -> str:
    """Escape HTML special characters in a text node.

    Converts exactly four characters:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;

    Single quotes and non-ASCII characters pass through unchanged.
    Python's html.escape() would turn ' into &#x27;, which is why
    quote=False is used and the double quote is replaced separately.

    Examples:
        >>> escape_text("if a < b && c > \\"d\\"")
        'if a &lt; b &amp;&amp; c &gt; &quot;d&quot;'
        >>> escape_text("it's")
        "it's"
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def unescape_text(text: str) -> str:
    """Decode the entities produced by escape_text.

    Only the four entities emitted by the renderer are recognized, so
    text that legitimately contains e.g. ``&#39;`` is left alone.
    """
    return (
        text.replace("&lt;", "<")
        .replace("&gt;", ">")
        .replace("&quot;", '"')
        .replace("&amp;", "&")
    )


def is_safe_identifier(value: str) -> bool:
    """Check that value can be embedded in a class attribute unquoted.

    Examples:
        >>> is_safe_identifier("c++")
        True
        >>> is_safe_identifier("x><script")
        False
    """
    return bool(value) and _SAFE_IDENTIFIER.fullmatch(value) is not None
