from __future__ import annotations

from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)


class Token(BaseModel):
    success: bool = True
    access_token: str
    token_type: str = "bearer"
