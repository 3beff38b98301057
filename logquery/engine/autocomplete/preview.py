"""Preview of the query text that results from accepting a suggestion."""

from ...models import ContextType, Suggestion
from ..core.catalog import is_catalog_field
from .context import analyze_context, clamp_cursor


def generate_preview(
    suggestion: Suggestion, current_value: str, cursor_position: int | None = None
) -> str:
    """Splice a suggestion into the current text.

    While a key or value is being typed, its span is replaced. Otherwise the
    suggestion is inserted at the cursor, separated by a space unless the
    text before the cursor already ends in ':' or whitespace.

    Args:
        suggestion: The suggestion being previewed
        current_value: Current input text
        cursor_position: Cursor offset into current_value (clamped; None = end)

    Returns:
        The resulting input text
    """
    if not isinstance(current_value, str) or not current_value.strip():
        return suggestion.value

    cursor = clamp_cursor(current_value, cursor_position)
    context = analyze_context(current_value, cursor)

    if (
        context.type in (ContextType.FILTER_KEY_PARTIAL, ContextType.FILTER_VALUE_CONTEXT)
        and context.start_position is not None
        and context.end_position is not None
    ):
        insertion = suggestion.value
        if context.type == ContextType.FILTER_KEY_PARTIAL and is_catalog_field(suggestion.category):
            # Unique-prefix shortcut offered values before the key was inserted
            insertion = f"{suggestion.category}:{insertion}"
        return (
            current_value[: context.start_position]
            + insertion
            + current_value[context.end_position :]
        )

    before, after = current_value[:cursor], current_value[cursor:]
    separator = "" if not before or before.endswith(":") or before[-1].isspace() else " "
    return f"{before}{separator}{suggestion.value}{after}"
