"""Mapping of parsed queries to backend query parameters.

The log query executor takes a flat string-to-string map. Each filter is
folded in by its field strategy; remaining free text becomes `search`.
"""

from datetime import datetime

from ...models import ParsedQuery
from .fields import get_field_strategy


def query_to_api_params(parsed: ParsedQuery, now: datetime | None = None) -> dict[str, str]:
    """Translate a parsed query into backend params.

    Args:
        parsed: Result of parse_query
        now: Reference time for named date ranges (defaults to the current
            local time)

    Returns:
        Flat dict of param name to string value
    """
    reference = now or datetime.now()
    params: dict[str, str] = {}

    for flt in parsed.filters:
        strategy = get_field_strategy(flt.field)
        if strategy is None:
            continue
        strategy.to_api_param(flt, params, reference)

    if parsed.text_search:
        existing = params.get("search")
        params["search"] = f"{existing} {parsed.text_search}" if existing else parsed.text_search

    return params
