"""Errors raised while inventing a genre card."""

from __future__ import annotations


class GenreGenerationError(Exception):
    """Base error; `status_code` is the HTTP status the API should answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class MissingApiKeyError(GenreGenerationError):
    def __init__(self) -> None:
        super().__init__("OPENAI_API_KEY is not configured")


class UpstreamError(GenreGenerationError):
    """The model provider could not be reached or answered with an error."""

    status_code = 502


class InvalidModelOutputError(GenreGenerationError):
    """The model answered, but not with a usable genre card."""

    status_code = 502
