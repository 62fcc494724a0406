from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from weather_report.api.deps import authenticate_admin, get_settings
from weather_report.core.config import Settings
from weather_report.core.security import create_access_token
from weather_report.schemas.auth import AdminLogin, Token

router = APIRouter(prefix="/admin")


@router.post("/login", response_model=Token)
def admin_login(
    response: Response,
    payload: AdminLogin,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Token:
    if not authenticate_admin(
        username=payload.username, password=payload.password, settings=settings
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(subject=payload.username, settings=settings)
    response.headers["Cache-Control"] = "no-store"
    response.headers["Pragma"] = "no-cache"
    return Token(access_token=token)
