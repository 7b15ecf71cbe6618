from __future__ import annotations

"""Root endpoint describing the available resources."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def index() -> dict:
    return {
        "name": "States API",
        "routes": [
            "GET /states?contig=true|false",
            "GET /states/{state}",
            "GET /states/{state}/{property}",
            "GET /states/{state}/funfact",
            "POST /states/{state}/funfact",
            "PATCH /states/{state}/funfact",
            "DELETE /states/{state}/funfact",
        ],
    }
