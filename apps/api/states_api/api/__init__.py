from __future__ import annotations

from fastapi import APIRouter

from states_api.api import routes_index, routes_states

router = APIRouter()
router.include_router(routes_index.router)
router.include_router(routes_states.router)
