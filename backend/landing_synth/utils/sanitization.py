"""HTML sanitization for prompt-derived text"""

import bleach


def escape_html(text: str) -> str:
    """
    Escape a prompt-derived string for placement in a text node.

    No tags survive; ``<``, ``>`` and bare ``&`` become entities, while plain
    words come back unchanged.
    """
    return bleach.clean(text, tags=frozenset(), attributes={}, strip=False)
