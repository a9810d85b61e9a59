"""
Health endpoint for API v1.

Publicly accessible; it does not contact the remote events API.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("", response_model=Dict[str, str])
def health() -> Dict[str, str]:
    return {"status": "ok"}
