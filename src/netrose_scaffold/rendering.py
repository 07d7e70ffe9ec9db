"""Placeholder substitution for template text."""

from __future__ import annotations

import re
from collections.abc import Mapping

PLACEHOLDER_DELIMITER = "#"


def placeholder(key: str) -> str:
    """Return the token a key is written as inside a template, e.g. ``#NAMESPACE#``."""
    return f"{PLACEHOLDER_DELIMITER}{key}{PLACEHOLDER_DELIMITER}"


def render_template(text: str, substitutions: Mapping[str, str] | None = None) -> str:
    """
    Replace every placeholder of ``substitutions`` in ``text``.

    Replacement is an exact substring match done in one pass over the source text,
    so a replacement value containing another placeholder is not expanded again.
    Placeholders without an entry in ``substitutions`` are left verbatim.

    Args:
        text: Template text.
        substitutions: Mapping of placeholder name to replacement value.

    Returns:
        The rendered text. With no substitutions, ``text`` itself.
    """
    if not substitutions:
        return text

    tokens = {placeholder(key): value for key, value in substitutions.items()}
    # longest first, so overlapping keys resolve to the most specific token
    pattern = re.compile("|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True)))
    return pattern.sub(lambda m: tokens[m.group(0)], text)
