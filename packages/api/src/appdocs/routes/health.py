# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def health() -> dict[str, str]:
    return {"status": "ok"}
