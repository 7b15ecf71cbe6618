from __future__ import annotations

"""Request dependencies shared by the per-state routes."""

from states_api.core.errors import NotFoundError
from states_api.domain.merge import merge_state_record
from states_api.services.record_store import get_store
from states_api.services.static_data import find_static_state


def get_state_data(state: str) -> dict:
    """Resolve the ``{state}`` path parameter to its merged state view."""
    static = find_static_state(state)
    if static is None:
        raise NotFoundError("Invalid state abbreviation parameter")

    record = get_store().find_one(static["code"])
    return merge_state_record(static, record.to_document() if record else None)
