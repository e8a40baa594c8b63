"""Prompting the model provider for a new music micro-genre."""

from __future__ import annotations

import json
import logging
import math
from typing import Any

import openai
from openai import OpenAI

from app.config import Settings
from app.domain.errors import InvalidModelOutputError, MissingApiKeyError, UpstreamError
from app.domain.genre_card import GenreCard, response_format, validate_genre_card

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.9
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 1.3
DEFAULT_SEED = "surprise"

INSTRUCTIONS = (
    "You are an imaginative music trend oracle. Invent original, fictional micro-genres "
    "that sound plausible but are not existing genres. Avoid reusing known genre names. "
    "Always return STRICT JSON that matches the provided JSON Schema. Use inventive, "
    "modern, evocative language. Keep the title punchy (max 3 words) and the tagline a "
    "single line (max 140 chars). The visuals should loosely match the vibe."
)


def build_user_prompt(seed: str) -> str:
    return (
        "Create one entirely new music micro-genre. It must not be an existing genre.\n"
        f"Seed vibe (optional): {seed or DEFAULT_SEED}."
    )


def clamp_temperature(value: Any) -> float:
    """Coerce to float and clamp into the supported range; unusable input gets the default."""

    if value is None or isinstance(value, bool):
        return DEFAULT_TEMPERATURE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TEMPERATURE
    if math.isnan(number):
        return DEFAULT_TEMPERATURE
    return max(MIN_TEMPERATURE, min(MAX_TEMPERATURE, number))


def _first_text_chunk(response: Any) -> str:
    output = getattr(response, "output", None) or []
    if not output:
        return "{}"
    chunks = getattr(output[0], "content", None) or []
    for chunk_type in ("output_text", "text"):
        for chunk in chunks:
            if getattr(chunk, "type", None) == chunk_type and getattr(chunk, "text", None):
                return chunk.text
    return "{}"


def extract_card_payload(response: Any) -> Any:
    """Decode the JSON body of a Responses API result.

    `output_text` is tried first. If it is missing or not valid JSON, the first
    text chunk of the first output item is used instead.
    """

    try:
        return json.loads(getattr(response, "output_text", None))
    except (TypeError, ValueError):
        logger.warning("output_text was not valid JSON, falling back to output content")

    text = _first_text_chunk(response)
    try:
        return json.loads(text)
    except ValueError as exc:
        raise InvalidModelOutputError(f"Model returned invalid JSON: {exc}") from exc


def build_client(settings: Settings) -> OpenAI:
    if not settings.openai_api_key:
        raise MissingApiKeyError()
    return OpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout)


class GenreOracle:
    """Asks the model for one genre card and checks what comes back."""

    def __init__(self, client: Any, model: str) -> None:
        self.client = client
        self.model = model

    def invent(self, seed: str = "", temperature: Any = DEFAULT_TEMPERATURE) -> GenreCard:
        temperature = clamp_temperature(temperature)
        logger.info("Inventing genre model=%s seed=%r temperature=%.2f", self.model, seed, temperature)

        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=INSTRUCTIONS,
                input=[{"role": "user", "content": build_user_prompt(seed)}],
                temperature=temperature,
                text={"format": response_format()},
            )
        except openai.APIStatusError as exc:
            raise UpstreamError(exc.message or "Upstream error", status_code=exc.status_code) from exc
        except openai.APIConnectionError as exc:
            raise UpstreamError(str(exc) or "Could not reach the model provider") from exc

        card = validate_genre_card(extract_card_payload(response))
        logger.info("Invented genre %r", card.title)
        return card
