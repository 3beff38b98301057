"""Cursor context classification for query autocomplete.

The context is re-derived from scratch on every call, looking only at the
text strictly before the cursor. There is no persisted parse tree.
"""

import logging
import re

from ...models import ContextType, QueryContext
from ..core.catalog import DYNAMIC_KEYS, is_option_value

logger = logging.getLogger(__name__)

# key:partial at the end of the text, key at start or after whitespace
_VALUE_CONTEXT_PATTERN = re.compile(r'(?:^|\s)(\w+):(\S*)$')
# key:"quoted value with spaces" that has already been closed
_CLOSED_QUOTED_PATTERN = re.compile(r'(?:^|\s)(\w+):("[^"]+")$')
# bare word at the end of the text, at start or after whitespace
_KEY_PARTIAL_PATTERN = re.compile(r'(?:^|\s)(\w+)$')


def clamp_cursor(text: str, cursor_position: int | None) -> int:
    """Clamp a cursor offset into [0, len(text)]. None means end of text."""
    if cursor_position is None:
        return len(text)
    return max(0, min(cursor_position, len(text)))


def is_value_complete(filter_key: str, value: str) -> bool:
    """Check whether a typed value needs no further completion.

    A value is complete when it is exactly one of the catalog options of
    the field, or, for workflow/folder, a closed non-empty quoted string.
    """
    if is_option_value(filter_key, value):
        return True
    if filter_key in DYNAMIC_KEYS:
        return len(value) > 2 and value.startswith('"') and value.endswith('"')
    return False


def analyze_context(text: str, cursor_position: int | None = None) -> QueryContext:
    """Classify what the user is typing at the cursor.

    Args:
        text: Full input text
        cursor_position: Cursor offset into text (clamped; None = end)

    Returns:
        QueryContext; spans are [start_position, end_position) offsets into text
    """
    if not isinstance(text, str):
        return QueryContext(type=ContextType.INITIAL)

    cursor = clamp_cursor(text, cursor_position)
    before = text[:cursor]

    if not before or before[-1].isspace():
        return QueryContext(type=ContextType.INITIAL)

    value_match = _VALUE_CONTEXT_PATTERN.search(before)
    if value_match:
        filter_key, partial = value_match.group(1), value_match.group(2)
        if not partial:
            # Bare "key:" is resolved by the suggestion provider directly
            return QueryContext(type=ContextType.INITIAL)
        if is_value_complete(filter_key, partial):
            return QueryContext(type=ContextType.INITIAL)
        return QueryContext(
            type=ContextType.FILTER_VALUE_CONTEXT,
            filter_key=filter_key,
            partial_input=partial,
            start_position=value_match.start(2),
            end_position=cursor,
        )

    quoted_match = _CLOSED_QUOTED_PATTERN.search(before)
    if quoted_match and is_value_complete(quoted_match.group(1), quoted_match.group(2)):
        return QueryContext(type=ContextType.INITIAL)

    key_match = _KEY_PARTIAL_PATTERN.search(before)
    if key_match:
        return QueryContext(
            type=ContextType.FILTER_KEY_PARTIAL,
            partial_input=key_match.group(1),
            start_position=key_match.start(1),
            end_position=cursor,
        )

    logger.debug(f"No completion context at offset {cursor}")
    return QueryContext(type=ContextType.TEXT_SEARCH)
