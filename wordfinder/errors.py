from __future__ import annotations

from .schemas import ErrorPayload


class WordFinderError(Exception):
    """Base class for every recoverable engine error."""

    code = 'error'
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return ErrorPayload(code=self.code, message=self.message).model_dump()


class LoadError(WordFinderError):
    # Dictionary source missing or unreadable; the engine keeps running empty
    code = 'load_error'
    status_code = 503


class InvalidInputError(WordFinderError):
    code = 'invalid_input'
    status_code = 400


class InputTooLongError(WordFinderError):
    code = 'input_too_long'
    status_code = 400

    def __init__(self, length: int, limit: int):
        super().__init__(f"Please enter no more than {limit} letters (got {length}).")
        self.length = length
        self.limit = limit


class EvaluationError(WordFinderError):
    code = 'evaluation_error'
    status_code = 503
