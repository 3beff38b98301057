"""Filter catalog for the log search query language.

This module contains the static table of filter fields offered by
autocomplete, along with the keys whose values come from elsewhere:
- Catalog fields with enumerated options (level, trigger, cost, date, duration)
- Dynamic keys whose values are supplied by the host (workflow, folder)
- Id keys that accept any exact id (workflowId, executionId)
"""

from ...models import FilterDefinition, FilterOption

# ---------------------------------------------------------------------------
# Catalog fields, in the order they are suggested.
# ---------------------------------------------------------------------------
FILTER_DEFINITIONS: tuple[FilterDefinition, ...] = (
    FilterDefinition(
        key="level",
        label="Status",
        description="Filter by log level",
        options=(
            FilterOption(value="error", label="Error", description="Error logs only"),
            FilterOption(value="info", label="Info", description="Info logs only"),
        ),
    ),
    FilterDefinition(
        key="trigger",
        label="Trigger",
        description="Filter by trigger type",
        options=(
            FilterOption(value="api", label="API", description="API-triggered executions"),
            FilterOption(value="manual", label="Manual", description="Manually run executions"),
            FilterOption(value="webhook", label="Webhook", description="Webhook-triggered executions"),
            FilterOption(value="chat", label="Chat", description="Chat-triggered executions"),
            FilterOption(value="schedule", label="Schedule", description="Scheduled executions"),
        ),
    ),
    FilterDefinition(
        key="cost",
        label="Cost",
        description="Filter by execution cost",
        options=(
            FilterOption(value=">0.01", label="Over $0.01", description="Executions costing more than $0.01"),
            FilterOption(value="<0.005", label="Under $0.005", description="Executions costing less than $0.005"),
            FilterOption(value=">0.05", label="Over $0.05", description="Executions costing more than $0.05"),
            FilterOption(value="=0", label="Free", description="Free executions"),
            FilterOption(value=">0", label="Paid", description="Executions with any cost"),
        ),
    ),
    FilterDefinition(
        key="date",
        label="Date",
        description="Filter by date range",
        options=(
            FilterOption(value="today", label="Today", description="Today's logs"),
            FilterOption(value="yesterday", label="Yesterday", description="Yesterday's logs"),
            FilterOption(value="this-week", label="This week", description="Since Monday"),
            FilterOption(value="last-week", label="Last week", description="Previous Monday to Sunday"),
            FilterOption(value="this-month", label="This month", description="Since the first of the month"),
        ),
    ),
    FilterDefinition(
        key="duration",
        label="Duration",
        description="Filter by execution duration",
        options=(
            FilterOption(value=">5s", label="Over 5s", description="Executions longer than 5 seconds"),
            FilterOption(value="<1s", label="Under 1s", description="Executions shorter than 1 second"),
            FilterOption(value=">10s", label="Over 10s", description="Executions longer than 10 seconds"),
            FilterOption(value=">30s", label="Over 30s", description="Executions longer than 30 seconds"),
            FilterOption(value="<500ms", label="Under 0.5s", description="Executions shorter than 500ms"),
        ),
    ),
)

_DEFINITIONS_BY_KEY: dict[str, FilterDefinition] = {d.key: d for d in FILTER_DEFINITIONS}

# Keys whose values are host-supplied names, suggested quoted
DYNAMIC_KEYS: dict[str, tuple[str, str]] = {
    "workflow": ("Workflow", "Filter by workflow name"),
    "folder": ("Folder", "Filter by folder name"),
}

# Keys that accept an exact id and are never enumerated
ID_KEYS: dict[str, tuple[str, str]] = {
    "workflowId": ("Workflow ID", "Filter by exact workflow id"),
    "executionId": ("Execution ID", "Filter by exact execution id"),
}

# Maximum number of dynamic-domain entries offered at once
MAX_DYNAMIC_SUGGESTIONS = 8


def get_filter_definition(key: str) -> FilterDefinition | None:
    """Return the catalog entry for a key, or None if it is not a catalog field."""
    return _DEFINITIONS_BY_KEY.get(key)


def is_catalog_field(key: str) -> bool:
    return key in _DEFINITIONS_BY_KEY


def is_option_value(key: str, value: str) -> bool:
    """Check whether value is exactly one of the enumerated options of key."""
    definition = _DEFINITIONS_BY_KEY.get(key)
    if definition is None:
        return False
    return any(option.value == value for option in definition.options)
