import pytest

from app.domain.errors import InvalidModelOutputError
from app.domain.genre_card import (
    HEX_COLOR_PATTERN,
    InvalidGenreCardError,
    genre_card_json_schema,
    response_format,
    validate_genre_card,
)


def test_schema_requires_every_top_level_field():
    schema = genre_card_json_schema()

    assert schema["type"] == "object"
    assert schema["additionalProperties"] is False
    assert set(schema["required"]) == {"title", "tagline", "palette", "visuals"}
    assert "$defs" not in schema


def test_schema_inlines_palette_with_hex_patterns():
    palette = genre_card_json_schema()["properties"]["palette"]

    assert palette["type"] == "object"
    assert palette["additionalProperties"] is False
    assert set(palette["required"]) == {"bg", "primary", "secondary", "accent", "text"}
    for slot in palette["required"]:
        assert palette["properties"][slot]["pattern"] == HEX_COLOR_PATTERN
    assert "title" not in palette


def test_schema_visuals_enums():
    visuals = genre_card_json_schema()["properties"]["visuals"]

    assert set(visuals["required"]) == {"font_style", "weight", "texture", "shape", "mood"}
    props = visuals["properties"]
    assert props["font_style"]["enum"] == ["sans", "serif", "mono", "display", "hand", "blackletter"]
    assert props["weight"]["enum"] == ["200", "300", "400", "500", "600", "700", "800", "900"]
    assert "neon" in props["texture"]["enum"]
    assert "checker" in props["shape"]["enum"]
    assert props["mood"]["type"] == "string"


def test_response_format_is_strict_and_named():
    fmt = response_format()

    assert fmt["type"] == "json_schema"
    assert fmt["name"] == "GenreCard"
    assert fmt["strict"] is True
    assert fmt["schema"] == genre_card_json_schema()


def test_validate_genre_card_accepts_sample(sample_card):
    card = validate_genre_card(sample_card)

    assert card.title == "Glacier Dub"
    assert card.palette.accent == "#FF6F91"
    assert card.visuals.weight == "700"


def test_validate_genre_card_rejects_bad_hex(sample_card):
    sample_card["palette"]["bg"] = "navy"

    with pytest.raises(InvalidGenreCardError, match="palette.bg"):
        validate_genre_card(sample_card)


def test_validate_genre_card_rejects_unknown_texture(sample_card):
    sample_card["visuals"]["texture"] = "velvet"

    with pytest.raises(InvalidGenreCardError, match="visuals.texture"):
        validate_genre_card(sample_card)


def test_validate_genre_card_rejects_extra_fields(sample_card):
    sample_card["bpm"] = 128

    with pytest.raises(InvalidGenreCardError, match="bpm"):
        validate_genre_card(sample_card)


def test_validate_genre_card_rejects_non_object():
    with pytest.raises(InvalidGenreCardError) as excinfo:
        validate_genre_card(["not", "a", "card"])

    assert isinstance(excinfo.value, InvalidModelOutputError)
    assert excinfo.value.status_code == 502
