"""Suggestion provider for query autocomplete.

SearchSuggestions holds the host-supplied dynamic domains (workflow and
folder names) and turns the cursor context into a ranked group of
candidate completions:
- Filter keys while a bare word is being typed
- Filter values once a key and colon are present
- Nothing for plain free text

Ranking is catalog/domain order; candidates are only filtered, never scored.
"""

import logging
import re
from collections.abc import Iterable

from ...models import (
    ContextType,
    FilterDefinition,
    Suggestion,
    SuggestionGroup,
    SuggestionGroupType,
)
from ..core.catalog import (
    DYNAMIC_KEYS,
    FILTER_DEFINITIONS,
    ID_KEYS,
    MAX_DYNAMIC_SUGGESTIONS,
    get_filter_definition,
)
from .context import analyze_context, clamp_cursor

logger = logging.getLogger(__name__)

# Category shared by all filter-key suggestions
KEY_CATEGORY = "filters"

# "key:" immediately before the cursor, nothing typed after it
_BARE_KEY_PATTERN = re.compile(r'(?:^|\s)(\w+):$')


def _key_suggestion(key: str, label: str, description: str | None) -> Suggestion:
    return Suggestion(
        id=f"filter-key-{key}",
        value=f"{key}:",
        label=label,
        description=description,
        category=KEY_CATEGORY,
    )


def _prefix_matches(partial: str, *candidates: str) -> bool:
    needle = partial.lower()
    return any(candidate.lower().startswith(needle) for candidate in candidates)


class SearchSuggestions:
    """Autocomplete engine for the log search bar.

    One instance is driven by one caller at a time. Dynamic domains are
    read-only during a call and replaced only via update_available_data.

    Args:
        workflows: Workflow names offered for workflow:
        folders: Folder names offered for folder:
    """

    def __init__(
        self,
        workflows: Iterable[str] | None = None,
        folders: Iterable[str] | None = None,
    ):
        self._workflows: list[str] = list(workflows or [])
        self._folders: list[str] = list(folders or [])

    @property
    def workflows(self) -> tuple[str, ...]:
        return tuple(self._workflows)

    @property
    def folders(self) -> tuple[str, ...]:
        return tuple(self._folders)

    def update_available_data(
        self,
        workflows: Iterable[str] | None = None,
        folders: Iterable[str] | None = None,
    ) -> None:
        """Replace the dynamic domains. A None argument leaves that list unchanged."""
        if workflows is not None:
            self._workflows = list(workflows)
        if folders is not None:
            self._folders = list(folders)
        logger.info(
            f"Autocomplete domains updated: {len(self._workflows)} workflows, "
            f"{len(self._folders)} folders"
        )

    def _domain(self, key: str) -> list[str]:
        return self._workflows if key == "workflow" else self._folders

    # ============ GROUP BUILDERS ============

    def get_filter_keys(self, partial: str = "") -> SuggestionGroup:
        """Build the filter-keys group for a (possibly empty) partial word.

        Args:
            partial: Word typed so far; matched as a case-insensitive prefix
                of the key or its label

        Returns:
            SuggestionGroup of key suggestions, catalog fields first
        """
        suggestions: list[Suggestion] = []

        for definition in FILTER_DEFINITIONS:
            if _prefix_matches(partial, definition.key, definition.label):
                suggestions.append(
                    _key_suggestion(definition.key, definition.label, definition.description)
                )

        for key, (label, description) in DYNAMIC_KEYS.items():
            if self._domain(key) and _prefix_matches(partial, key, label):
                suggestions.append(_key_suggestion(key, label, description))

        for key, (label, description) in ID_KEYS.items():
            if _prefix_matches(partial, key, label):
                suggestions.append(_key_suggestion(key, label, description))

        return SuggestionGroup(type=SuggestionGroupType.FILTER_KEYS, suggestions=suggestions)

    def get_filter_values(self, filter_key: str, partial: str = "") -> SuggestionGroup | None:
        """Build the filter-values group for a key.

        Args:
            filter_key: Field whose values are requested
            partial: Value typed so far; matched as a case-insensitive substring

        Returns:
            SuggestionGroup scoped to filter_key, or None if the key is unknown
        """
        definition = get_filter_definition(filter_key)
        if definition is not None:
            suggestions = self._catalog_values(definition, partial)
        elif filter_key in DYNAMIC_KEYS:
            suggestions = self._dynamic_values(filter_key, partial)
        elif filter_key in ID_KEYS:
            suggestions = [self._id_hint(filter_key, partial)]
        else:
            return None

        return SuggestionGroup(
            type=SuggestionGroupType.FILTER_VALUES,
            filter_key=filter_key,
            suggestions=suggestions,
        )

    def _catalog_values(self, definition: FilterDefinition, partial: str) -> list[Suggestion]:
        needle = partial.lower()
        return [
            Suggestion(
                id=f"filter-value-{definition.key}-{option.value}",
                value=option.value,
                label=option.label,
                description=option.description,
                category=definition.key,
            )
            for option in definition.options
            if needle in option.value.lower() or needle in option.label.lower()
        ]

    def _dynamic_values(self, filter_key: str, partial: str) -> list[Suggestion]:
        needle = partial.strip('"').lower()
        label = DYNAMIC_KEYS[filter_key][0]
        suggestions: list[Suggestion] = []
        for name in self._domain(filter_key):
            if needle not in name.lower():
                continue
            suggestions.append(
                Suggestion(
                    id=f"filter-value-{filter_key}-{name}",
                    value=f'"{name}"',
                    label=name,
                    description=f"{label}: {name}",
                    category=filter_key,
                )
            )
            if len(suggestions) >= MAX_DYNAMIC_SUGGESTIONS:
                break
        return suggestions

    def _id_hint(self, filter_key: str, partial: str) -> Suggestion:
        label = ID_KEYS[filter_key][0]
        return Suggestion(
            id=f"filter-value-{filter_key}-hint",
            value=partial,
            label=f"Enter exact {label.lower()}",
            description=f"Type the full {label.lower()} to match a single record",
            category=filter_key,
        )

    # ============ ENTRY POINT ============

    def get_suggestions(self, text: str, cursor_position: int | None = None) -> SuggestionGroup | None:
        """Suggest completions for the text at the cursor.

        Args:
            text: Full input text
            cursor_position: Cursor offset into text (clamped; None = end)

        Returns:
            SuggestionGroup, or None when nothing applies (free text,
            unknown field)
        """
        if not isinstance(text, str):
            return None

        cursor = clamp_cursor(text, cursor_position)
        bare_key = _BARE_KEY_PATTERN.search(text[:cursor])
        if bare_key:
            return self.get_filter_values(bare_key.group(1))

        context = analyze_context(text, cursor)

        if context.type in (ContextType.INITIAL, ContextType.FILTER_KEY_PARTIAL):
            partial = context.partial_input or ""
            if partial:
                matches = [
                    d for d in FILTER_DEFINITIONS if _prefix_matches(partial, d.key, d.label)
                ]
                if len(matches) == 1:
                    # Unique prefix: skip straight to the field's values
                    return self.get_filter_values(matches[0].key)
            return self.get_filter_keys(partial)

        if context.type == ContextType.FILTER_VALUE_CONTEXT and context.filter_key:
            return self.get_filter_values(context.filter_key, context.partial_input or "")

        return None
