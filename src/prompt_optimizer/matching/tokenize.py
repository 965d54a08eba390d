"""Query and field tokenization."""

from __future__ import annotations

import re

# Anything that is not a lowercase letter (including German umlauts and
# sharp s), a digit, whitespace, a period or a hyphen becomes a separator
_SEPARATOR_RE = re.compile(r"[^a-z0-9äöüß\s.-]")


def tokenize(text: str | None) -> list[str]:
    """Normalize text into lowercase tokens longer than one character.

    Periods and hyphens stay inside tokens, so ``next.js`` and
    ``end-to-end`` survive intact. No stopwords are removed.

    Examples:
        >>> tokenize("Build a Shopify store!")
        ['build', 'shopify', 'store']
    """
    if not text:
        return []
    cleaned = _SEPARATOR_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) > 1]
