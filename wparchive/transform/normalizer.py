"""Punctuation canonicalization and category-scoped literal substitution."""

from __future__ import annotations

import logging

from wparchive.config.models import PatternTable

logger = logging.getLogger(__name__)

_CURLY_QUOTES = str.maketrans({
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
})


def normalize_common_punctuation(text: str) -> str:
    """Straighten curly single and double quotes."""
    return text.translate(_CURLY_QUOTES)


def apply_patterns(
    text: str,
    category: str,
    patterns: PatternTable,
    log: logging.Logger = logger,
) -> str:
    """Apply the category's replace rules to `text`, in table order.

    Each rule runs on the output of the previous one, so a later needle can
    match text an earlier substitute introduced. A missing or empty
    category is logged and leaves `text` untouched.
    """
    if category not in patterns:
        log.info("patterns missing for category %s", category)
        return text

    rules = patterns[category]
    if not rules:
        log.info("pattern list empty for category %s", category)
        return text

    for rule in rules:
        if not rule.needle:
            continue
        text = text.replace(rule.needle, rule.substitute)
    return text
