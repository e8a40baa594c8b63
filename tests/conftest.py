import json
from types import SimpleNamespace

import pytest

SAMPLE_CARD = {
    "title": "Glacier Dub",
    "tagline": "Sub-bass tremors recorded inside melting ice caves.",
    "palette": {
        "bg": "#0B1D2A",
        "primary": "#7FD1FF",
        "secondary": "#2E5E7E",
        "accent": "#FF6F91",
        "text": "#F4FBFF",
    },
    "visuals": {
        "font_style": "display",
        "weight": "700",
        "texture": "grain",
        "shape": "waves",
        "mood": "cold, slow, cavernous",
    },
}


def make_response(output_text=None, chunks=None):
    output = [SimpleNamespace(type="message", content=chunks)] if chunks is not None else []
    return SimpleNamespace(output_text=output_text, output=output)


class FakeResponses:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeClient:
    def __init__(self, result):
        self.responses = FakeResponses(result)
        self.closed = False

    def close(self):
        self.closed = True

    @property
    def calls(self):
        return self.responses.calls


@pytest.fixture
def sample_card():
    return json.loads(json.dumps(SAMPLE_CARD))


@pytest.fixture
def card_response():
    return make_response(output_text=json.dumps(SAMPLE_CARD))
