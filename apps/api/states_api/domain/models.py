from __future__ import annotations

"""Pydantic models for persisted state records and request payloads."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StateRecord(BaseModel):
    """Mutable per-state document held in the record store, keyed by state code."""

    model_config = ConfigDict(populate_by_name=True)

    state_code: str = Field(alias="stateCode")
    funfacts: Optional[List[Any]] = None

    def to_document(self) -> dict:
        """Return the stored document shape; unset fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class _LooseBody(BaseModel):
    """Request body read from raw JSON; fields stay untyped so missing or
    malformed values reach the handler and get the API's own messages.
    """

    @classmethod
    def from_payload(cls, payload: Any):
        """Build from a decoded body; anything but a JSON object counts as empty."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class FunFactsRequest(_LooseBody):
    """Body of POST /states/{state}/funfact."""

    funfacts: Any = None


class FunFactEditRequest(_LooseBody):
    """Body of PATCH and DELETE /states/{state}/funfact."""

    index: Any = None
    funfact: Any = None
