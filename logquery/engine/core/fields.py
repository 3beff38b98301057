"""Per-field semantics shared by the parser and the API params mapper.

Each parseable field has a FieldStrategy:
- coerce: turns the raw value (operator and quotes already removed) into
  a typed value, or None to reject the filter
- to_api_param: folds a parsed filter into the flat backend params dict

Keeping both in one table means a field's parsing and mapping rules
cannot drift apart.
"""

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ...models import FieldKind, FilterOperator, ParsedFilter
from .dates import named_date_range, to_iso

logger = logging.getLogger(__name__)

# Longest operators first so ">=" is never read as ">" followed by "="
OPERATORS: tuple[FilterOperator, ...] = (
    FilterOperator.GTE,
    FilterOperator.LTE,
    FilterOperator.NEQ,
    FilterOperator.GT,
    FilterOperator.LT,
    FilterOperator.EQ,
)

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

Coercer = Callable[[str], str | float | None]
ParamMapper = Callable[[ParsedFilter, dict[str, str], datetime], None]


@dataclass(frozen=True)
class FieldStrategy:
    """How a single filter field is coerced and mapped."""

    kind: FieldKind
    coerce: Coercer
    to_api_param: ParamMapper


# ============ VALUE HELPERS ============


def extract_operator(raw: str) -> tuple[FilterOperator, str]:
    """Split a leading comparison operator off a raw value.

    Args:
        raw: Value text as typed, e.g. ">=0.5" or "error"

    Returns:
        Tuple of (operator, remaining value). Defaults to "=" when no
        operator prefix is present.
    """
    for operator in OPERATORS:
        if raw.startswith(operator.value):
            return operator, raw[len(operator.value) :]
    return FilterOperator.EQ, raw


def strip_quotes(raw: str) -> str:
    """Remove one pair of surrounding double quotes, only if both are present."""
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    return raw


def parse_number(raw: str) -> float | None:
    """Parse a plain decimal number. Returns None for anything else, inf and nan included."""
    if not _NUMBER_PATTERN.fullmatch(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    """Render a number as JavaScript's Number#toString does: 5000, 0.01, 1e-7, 1e+21."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 0:
        # Positional notation down to 1e-6
        sign = "-" if value < 0 else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-power - 1)}{digits}"
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _format_value(value: str | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return value


# ============ COERCERS ============


def _coerce_string(raw: str) -> str:
    return raw


def _coerce_number(raw: str) -> float | None:
    return parse_number(raw)


def _coerce_duration(raw: str) -> float | None:
    # Canonical unit is milliseconds
    if raw.endswith("ms"):
        return parse_number(raw[:-2])
    if raw.endswith("s"):
        seconds = parse_number(raw[:-1])
        return None if seconds is None else seconds * 1000
    return parse_number(raw)


# ============ API PARAM MAPPERS ============


def _set_param(name: str) -> ParamMapper:
    """Mapper writing an equality filter's value under a fixed param name."""

    def mapper(flt: ParsedFilter, params: dict[str, str], now: datetime) -> None:
        if flt.operator == FilterOperator.EQ:
            params[name] = _format_value(flt.value)

    return mapper


def _append_trigger(flt: ParsedFilter, params: dict[str, str], now: datetime) -> None:
    if flt.operator != FilterOperator.EQ:
        return
    value = _format_value(flt.value)
    existing = params.get("triggers")
    params["triggers"] = f"{existing},{value}" if existing else value


def _append_search(flt: ParsedFilter, params: dict[str, str], now: datetime) -> None:
    if flt.operator != FilterOperator.EQ:
        return
    value = _format_value(flt.value)
    existing = params.get("search")
    params["search"] = f"{existing} {value}" if existing else value


def _map_date(flt: ParsedFilter, params: dict[str, str], now: datetime) -> None:
    if flt.operator != FilterOperator.EQ:
        return
    date_range = named_date_range(_format_value(flt.value), now)
    if date_range is None:
        logger.debug(f"Ignoring unknown date range: {flt.value!r}")
        return
    start, end = date_range
    params["startDate"] = to_iso(start)
    if end is not None:
        params["endDate"] = to_iso(end)


def _set_comparison_flag(flt: ParsedFilter, params: dict[str, str], now: datetime) -> None:
    # Comparison semantics are resolved by the query executor, not here
    params[f"{flt.field}_{flt.operator.value}_{_format_value(flt.value)}"] = "true"


# ============ STRATEGY TABLE ============

FIELD_STRATEGIES: dict[str, FieldStrategy] = {
    "level": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("level")),
    "status": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("level")),
    "trigger": FieldStrategy(FieldKind.STRING, _coerce_string, _append_trigger),
    "workflow": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("workflowName")),
    "folder": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("folderName")),
    "execution": FieldStrategy(FieldKind.STRING, _coerce_string, _append_search),
    "workflowId": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("workflowId")),
    "executionId": FieldStrategy(FieldKind.STRING, _coerce_string, _set_param("executionId")),
    "date": FieldStrategy(FieldKind.DATE, _coerce_string, _map_date),
    "cost": FieldStrategy(FieldKind.NUMBER, _coerce_number, _set_comparison_flag),
    "duration": FieldStrategy(FieldKind.NUMBER, _coerce_duration, _set_comparison_flag),
}


def get_field_strategy(field: str) -> FieldStrategy | None:
    return FIELD_STRATEGIES.get(field)


def coerce_value(field: str, raw: str) -> str | float | None:
    """Coerce an operator-free, quote-free value for a field.

    Returns None if the field is unknown or the value does not fit its type.
    """
    strategy = FIELD_STRATEGIES.get(field)
    if strategy is None:
        return None
    return strategy.coerce(raw)
