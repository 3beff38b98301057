"""Tolerant parser for log search queries.

Turns free-form text such as

    level:error cost:>0.01 workflow:"Daily report" timeout

into structured filters plus a free-text remainder. The parser never
raises: a `field:value` pair it cannot accept (unknown field, value that
fails coercion) is kept verbatim as free text instead.
"""

import logging
import re

from ...models import ParsedFilter, ParsedQuery
from .fields import coerce_value, extract_operator, get_field_strategy, strip_quotes

logger = logging.getLogger(__name__)

# word ':' [operator] ( "quoted span" | non-whitespace run )
FILTER_PATTERN = re.compile(r'(\w+):((?:>=|<=|!=|>|<|=)?(?:"[^"]*"|\S+))')


def parse_filter(field: str, value_with_operator: str) -> ParsedFilter | None:
    """Parse a single filter value for a field.

    Args:
        field: Field name before the colon
        value_with_operator: Value text after the colon, operator included

    Returns:
        ParsedFilter, or None if the field is unknown or the value does not
        coerce (e.g. a non-numeric cost)
    """
    if get_field_strategy(field) is None:
        return None

    operator, raw_value = extract_operator(value_with_operator)
    value = coerce_value(field, strip_quotes(raw_value))
    if value is None:
        return None

    return ParsedFilter(
        field=field,
        operator=operator,
        value=value,
        original_value=value_with_operator,
    )


def parse_query(query: str) -> ParsedQuery:
    """Parse a query string into filters and free text.

    Args:
        query: Raw query text

    Returns:
        ParsedQuery whose text_search holds every span not consumed by a
        valid filter, joined with single spaces
    """
    if not isinstance(query, str) or not query:
        return ParsedQuery()

    filters: list[ParsedFilter] = []
    text_parts: list[str] = []
    last_index = 0

    for match in FILTER_PATTERN.finditer(query):
        text_parts.append(query[last_index : match.start()])

        field, value_with_operator = match.group(1), match.group(2)
        parsed = parse_filter(field, value_with_operator)
        if parsed is not None:
            filters.append(parsed)
        else:
            logger.debug(f"Keeping unrecognized filter as text: {match.group(0)!r}")
            text_parts.append(match.group(0))

        last_index = match.end()

    text_parts.append(query[last_index:])

    words = [word for part in text_parts for word in part.split()]
    return ParsedQuery(filters=filters, text_search=" ".join(words))
