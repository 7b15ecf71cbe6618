from __future__ import annotations

"""Single-property lookups on a merged state view."""

from typing import Any, Callable, Dict, Mapping, Optional

from states_api.core.errors import NotFoundError, ValidationError


def format_population(value: Any) -> Any:
    """Group digits the way an en-US locale does (39500000 -> "39,500,000")."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return value


# request names that differ from the stored field names
STATE_PROPERTY_ALIASES: Dict[str, str] = {
    "capital": "capital_city",
    "admission": "admission_date",
    "admitted": "admission_date",
}

# response keys that differ from the stored field names
STATE_PROPERTY_LABELS: Dict[str, str] = {
    "capital_city": "capital",
    "admission_date": "admitted",
}

STATE_PROPERTY_FORMATTERS: Dict[str, Callable[[Any], Any]] = {
    "population": format_population,
}


def normalize_property(name: str) -> str:
    key = name.lower()
    return STATE_PROPERTY_ALIASES.get(key, key)


def state_property(state_view: Mapping, name: Optional[str]) -> dict:
    """Return ``{"state": <name>, <label>: <value>}`` for one property of a state."""
    if not name:
        raise ValidationError("State property is required")

    key = normalize_property(name)
    value = state_view.get(key)
    if value is None:
        raise NotFoundError("Invalid state property")

    label = STATE_PROPERTY_LABELS.get(key, key)
    formatter = STATE_PROPERTY_FORMATTERS.get(key)
    return {
        "state": state_view.get("state"),
        label: formatter(value) if formatter else value,
    }
