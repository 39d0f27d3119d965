"""
Input Sanitization Module

Cleans measurement text and ingredient names arriving from recipe files,
request bodies and the command line before they reach the engine.
"""

import re

from constants.validation import MAX_LENGTHS

# Regular and non-breaking/typographic spaces copied out of web pages
_WHITESPACE_RE = re.compile(r'[\s\u00a0\u2000-\u200b]+')
_CONTROL_RE = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def normalize_whitespace(text):
    """
    Collapse every run of whitespace to one space and strip the ends.

    Control characters are removed. Nothing else about the text changes,
    so '1 1/2  cups' and '1 1/2 cups' both become '1 1/2 cups'.
    """
    text = _WHITESPACE_RE.sub(' ', text)
    return _CONTROL_RE.sub('', text).strip()


def sanitize_item_name(name, max_length=None):
    """
    Clean an ingredient or recipe name for display.

    Args:
        name: The name to sanitize (can be None)
        max_length: Maximum allowed length (default from MAX_LENGTHS)

    Returns:
        Sanitized name, truncated if necessary
    """
    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_name']

    if name is None:
        return ''

    if not isinstance(name, str):
        name = str(name)

    name = normalize_whitespace(name)

    # Truncate if too long
    if len(name) > max_length:
        name = name[:max_length - 3] + '...'

    return name
