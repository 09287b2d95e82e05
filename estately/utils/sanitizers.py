import html

import bleach


def sanitize_string(text):
    """Strip every HTML tag from user-supplied text and trim whitespace.

    bleach escapes the characters it leaves behind (``&`` becomes ``&amp;``);
    the result is stored as plain text, so the escaping is undone.
    """
    if text is None:
        return ''

    cleaned = bleach.clean(str(text), tags=[], attributes={}, strip=True)
    return html.unescape(cleaned).strip()
