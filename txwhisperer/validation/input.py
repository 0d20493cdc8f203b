from __future__ import annotations

from typing import Any

from fastapi import HTTPException

from txwhisperer.config import settings


def validate_input(raw: Any, max_length: int | None = None) -> str:
    """Boundary checks for user-supplied values before they reach the core."""
    if max_length is None:
        max_length = settings.max_input_length

    if not raw or not isinstance(raw, str):
        raise HTTPException(
            status_code=400,
            detail='Missing or invalid "input" field. Expected a string.',
        )

    value = raw.strip()
    if not value:
        raise HTTPException(status_code=400, detail="Input cannot be empty.")

    if len(value) > max_length:
        raise HTTPException(
            status_code=400,
            detail=f"Input too long. Maximum {max_length} characters.",
        )

    return value
