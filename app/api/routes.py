"""API routes for Genre Generator."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from app.config import Settings, get_settings
from app.domain.errors import GenreGenerationError
from app.domain.oracle import GenreOracle, build_client

router = APIRouter(prefix="/api", tags=["GenreGenerator"])


def get_openai_client(settings: Settings = Depends(get_settings)) -> Iterator[Any]:
    client = build_client(settings)
    try:
        yield client
    finally:
        client.close()


def get_oracle(
    client: Any = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
) -> GenreOracle:
    return GenreOracle(client=client, model=settings.openai_model)


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        405: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def generate_genre(
    payload: Optional[GenerateRequest] = None,
    oracle: GenreOracle = Depends(get_oracle),
) -> dict:
    payload = payload or GenerateRequest()
    try:
        card = oracle.invent(seed=payload.seed, temperature=payload.temperature)
    except GenreGenerationError:
        raise
    except Exception as exc:
        raise GenreGenerationError(str(exc)) from exc
    return {"ok": True, "data": card}


@router.api_route("/generate", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def reject_generate_method() -> None:
    raise HTTPException(status_code=405, detail="Method not allowed", headers={"Allow": "POST"})
