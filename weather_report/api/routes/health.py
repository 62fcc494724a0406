from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from weather_report.api.deps import get_record_store
from weather_report.repositories.base import RecordStore, StoreUnavailable

router = APIRouter()


@router.get("/health", tags=["meta"])
def health(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> dict[str, str]:
    try:
        store.ping()
    except StoreUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Weather store unavailable",
        ) from e
    return {"status": "ok"}
