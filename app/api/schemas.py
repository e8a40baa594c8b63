"""Request/response schemas for API routes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, field_validator

from app.domain.genre_card import GenreCard
from app.domain.oracle import DEFAULT_TEMPERATURE, clamp_temperature


class GenerateRequest(BaseModel):
    seed: str = ""
    temperature: float = DEFAULT_TEMPERATURE

    @field_validator("seed", mode="before")
    @classmethod
    def coerce_seed(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("temperature", mode="before")
    @classmethod
    def coerce_temperature(cls, value: Any) -> float:
        return clamp_temperature(value)


class GenerateResponse(BaseModel):
    ok: Literal[True] = True
    data: GenreCard


class ErrorResponse(BaseModel):
    ok: Literal[False] = False
    error: str
