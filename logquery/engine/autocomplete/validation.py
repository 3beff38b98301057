"""Structural completeness check run before a query is submitted."""

import re

# "key:" (optionally followed by whitespace) at the very end of the query
_DANGLING_KEY_PATTERN = re.compile(r'(?:^|\s)\w+:\s*$')


def validate_query(query: str) -> bool:
    """Check that a query is structurally complete.

    Returns False for a trailing key with no value or an unterminated
    double-quoted span. The empty query is valid.
    """
    if not isinstance(query, str):
        return False
    if query.count('"') % 2:
        return False
    return _DANGLING_KEY_PATTERN.search(query) is None
