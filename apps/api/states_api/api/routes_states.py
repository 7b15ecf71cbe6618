from __future__ import annotations

"""State endpoints: static reference data merged with stored fun facts."""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query

from states_api.api.dependencies import get_state_data
from states_api.domain import funfacts as funfact_ops
from states_api.domain.merge import filter_contiguous, merge_state_records
from states_api.domain.models import FunFactEditRequest, FunFactsRequest
from states_api.domain.properties import state_property
from states_api.services.record_store import get_store
from states_api.services.static_data import load_static_state_data

router = APIRouter(prefix="/states", tags=["states"])


def _save_fun_facts(state_code: str, funfacts: List[Any], unset_when_empty: bool = False) -> dict:
    """Persist the list and return the stored document with the list as written."""
    store = get_store()
    if funfacts or not unset_when_empty:
        record = store.find_one_and_update(state_code, {"funfacts": funfacts}, upsert=True)
    else:
        record = store.unset_field(state_code, "funfacts")

    document = record.to_document() if record else {"stateCode": state_code}
    document["funfacts"] = funfacts
    return document


@router.get("")
def get_states(contig: Optional[str] = Query(None)) -> List[dict]:
    """List every state; ``contig`` selects the lower 48 (true) or AK/HI (false)."""
    store = get_store()
    persisted = [r.to_document() for r in store.find_all()]
    states = merge_state_records(load_static_state_data(), persisted)
    return filter_contiguous(states, contig)


@router.get("/{state}")
def get_state(state_data: dict = Depends(get_state_data)) -> dict:
    return state_data


@router.get("/{state}/funfact")
def get_state_fun_fact(state_data: dict = Depends(get_state_data)) -> dict:
    return funfact_ops.random_fun_fact(state_data)


@router.post("/{state}/funfact")
def post_state_fun_fact(
    payload: Any = Body(None),
    state_data: dict = Depends(get_state_data),
) -> dict:
    """Append fun facts to a state, creating its record if needed."""
    request = FunFactsRequest.from_payload(payload)
    funfacts = funfact_ops.append_fun_facts(state_data, request.funfacts)
    return _save_fun_facts(state_data["code"], funfacts)


@router.patch("/{state}/funfact")
def replace_state_fun_fact(
    payload: Any = Body(None),
    state_data: dict = Depends(get_state_data),
) -> dict:
    """Replace the fun fact at a 1-based index."""
    request = FunFactEditRequest.from_payload(payload)
    funfacts = funfact_ops.replace_fun_fact(state_data, request.index, request.funfact)
    return _save_fun_facts(state_data["code"], funfacts)


@router.delete("/{state}/funfact")
def delete_state_fun_fact(
    payload: Any = Body(None),
    state_data: dict = Depends(get_state_data),
) -> dict:
    """Delete the fun fact at a 1-based index; an emptied list is unset in the store."""
    request = FunFactEditRequest.from_payload(payload)
    funfacts = funfact_ops.delete_fun_fact(state_data, request.index)
    return _save_fun_facts(state_data["code"], funfacts, unset_when_empty=True)


@router.get("/{state}/{property}")
def get_state_property(
    property_name: str = Path(alias="property"),
    state_data: dict = Depends(get_state_data),
) -> dict:
    """Return one property of a state, e.g. capital, nickname, population, admission."""
    return state_property(state_data, property_name)
