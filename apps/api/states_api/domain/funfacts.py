from __future__ import annotations

"""Array-style edits on a state's list of fun facts.

Each operation validates its input against the merged state view and returns
the new list; persisting it is left to the caller.
"""

import math
import random
from typing import Any, List, Mapping

from states_api.core.errors import NotFoundError, ValidationError


def is_blank(value: Any) -> bool:
    """True for values a JSON client would consider falsy: null, false, 0, NaN, "".

    Lists and objects, even empty ones, are not blank.
    """
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, (bool, int, float, str)):
        return not value
    return False


def current_fun_facts(state_view: Mapping) -> List[Any]:
    """Copy of the view's fun facts, or an empty list when absent or not a list."""
    funfacts = state_view.get("funfacts")
    if not isinstance(funfacts, list):
        return []
    return list(funfacts)


def random_fun_fact(state_view: Mapping) -> dict:
    """Pick one fun fact uniformly at random."""
    funfacts = current_fun_facts(state_view)
    if not funfacts:
        raise NotFoundError(f"No Fun Facts found for {state_view.get('state')}")
    return {"funfact": random.choice(funfacts)}


def append_fun_facts(state_view: Mapping, new_facts: Any) -> List[Any]:
    """Append ``new_facts`` in order after the existing fun facts."""
    if is_blank(new_facts):
        raise ValidationError("State fun facts value required")
    if not isinstance(new_facts, list):
        raise ValidationError("State fun facts value must be an array")

    funfacts = current_fun_facts(state_view)
    funfacts.extend(new_facts)
    return funfacts


def _position(index: Any) -> int:
    """Convert a 1-based index from a request body to a 0-based list position."""
    if isinstance(index, bool):
        raise ValidationError("State fun fact index value must be an integer")
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, str):
        try:
            index = int(index.strip())
        except ValueError:
            raise ValidationError("State fun fact index value must be an integer") from None
    if not isinstance(index, int):
        raise ValidationError("State fun fact index value must be an integer")
    return index - 1


def _existing_for_edit(state_view: Mapping, position: int) -> List[Any]:
    funfacts = state_view.get("funfacts")
    if not isinstance(funfacts, list) or not funfacts:
        raise NotFoundError(f"No Fun Facts found for {state_view.get('state')}")
    if position < 0 or position >= len(funfacts):
        raise NotFoundError(f"No Fun Fact found at that index for {state_view.get('state')}")
    return list(funfacts)


def replace_fun_fact(state_view: Mapping, index: Any, funfact: Any) -> List[Any]:
    """Overwrite the fun fact at 1-based ``index``.

    An index of 0 is rejected as missing, like any other falsy value.
    """
    if is_blank(index):
        raise ValidationError("State fun fact index value required")
    if is_blank(funfact):
        raise ValidationError("State fun fact value required")

    position = _position(index)
    funfacts = _existing_for_edit(state_view, position)
    funfacts[position] = funfact
    return funfacts


def delete_fun_fact(state_view: Mapping, index: Any) -> List[Any]:
    """Remove the fun fact at 1-based ``index``; the result may be empty."""
    if is_blank(index):
        raise ValidationError("State fun fact index value required")

    position = _position(index)
    funfacts = _existing_for_edit(state_view, position)
    del funfacts[position]
    return funfacts
