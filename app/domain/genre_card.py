"""Genre card models and the JSON schema handed to the model provider."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.errors import InvalidModelOutputError

HEX_COLOR_PATTERN = r"^#([0-9A-Fa-f]{6})$"
SCHEMA_NAME = "GenreCard"

FontStyle = Literal["sans", "serif", "mono", "display", "hand", "blackletter"]
FontWeight = Literal["200", "300", "400", "500", "600", "700", "800", "900"]
Texture = Literal["grain", "gloss", "paper", "vhs", "nebula", "neon", "linen", "noise"]
Shape = Literal["waves", "grid", "dots", "stripes", "rings", "spray", "burst", "checker"]


class InvalidGenreCardError(InvalidModelOutputError):
    """Decoded model output does not have the genre card shape."""


class Palette(BaseModel):
    model_config = ConfigDict(extra="forbid")

    bg: str = Field(pattern=HEX_COLOR_PATTERN)
    primary: str = Field(pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(pattern=HEX_COLOR_PATTERN)
    accent: str = Field(pattern=HEX_COLOR_PATTERN)
    text: str = Field(pattern=HEX_COLOR_PATTERN)


class Visuals(BaseModel):
    model_config = ConfigDict(extra="forbid")

    font_style: FontStyle
    weight: FontWeight
    texture: Texture
    shape: Shape
    mood: str


class GenreCard(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="2-3 words max, invented genre title. No quotes.")
    tagline: str = Field(description="<= 140 chars, single line, evocative but concrete.")
    palette: Palette
    visuals: Visuals


def _inline(node: Any, defs: dict[str, Any]) -> Any:
    """Resolve local $refs and drop pydantic titles."""

    if isinstance(node, list):
        return [_inline(item, defs) for item in node]
    if not isinstance(node, dict):
        return node

    if "$ref" in node:
        name = node["$ref"].rsplit("/", 1)[-1]
        resolved = _inline(defs[name], defs)
        extras = {key: value for key, value in node.items() if key != "$ref"}
        return {**resolved, **_inline(extras, defs)}

    cleaned: dict[str, Any] = {}
    for key, value in node.items():
        if key in ("title", "$defs"):
            continue
        if key == "properties":
            # Property names are data, not schema keywords.
            cleaned[key] = {name: _inline(sub, defs) for name, sub in value.items()}
        else:
            cleaned[key] = _inline(value, defs)
    return cleaned


def genre_card_json_schema() -> dict[str, Any]:
    """Strict JSON schema for one genre card, with nested objects inlined."""

    raw = GenreCard.model_json_schema()
    schema = _inline(raw, raw.get("$defs", {}))

    # Strict structured output wants every property listed as required.
    def _require_all(node: dict[str, Any]) -> None:
        if node.get("type") == "object":
            node["required"] = list(node.get("properties", {}))
            node["additionalProperties"] = False
            for child in node.get("properties", {}).values():
                _require_all(child)

    _require_all(schema)
    return schema


def response_format() -> dict[str, Any]:
    """`text.format` block for the Responses API."""

    return {
        "type": "json_schema",
        "name": SCHEMA_NAME,
        "strict": True,
        "schema": genre_card_json_schema(),
    }


def validate_genre_card(data: Any) -> GenreCard:
    if not isinstance(data, dict):
        raise InvalidGenreCardError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return GenreCard.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise InvalidGenreCardError(f"Genre card failed validation: {fields}") from exc
