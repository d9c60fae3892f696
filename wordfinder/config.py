from __future__ import annotations
import os
from typing import Optional

from pydantic import BaseModel, Field

from .dictionary import MIN_WORD_LENGTH
from .matching import MAX_INPUT_LENGTH

DEFAULT_DICTIONARY_PATH = 'assets/dictionary.txt'


class EngineConfig(BaseModel):
    max_input_length: int = Field(MAX_INPUT_LENGTH, ge=1)
    min_word_length: int = Field(MIN_WORD_LENGTH, ge=1)
    # None means "ask the OS for the processor count on every query"
    workers: Optional[int] = Field(None, ge=1)
    dictionary_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        values = {
            'dictionary_path': os.environ.get('WORDFINDER_DICTIONARY', DEFAULT_DICTIONARY_PATH),
        }
        for field, var in (
            ('max_input_length', 'WORDFINDER_MAX_INPUT_LENGTH'),
            ('min_word_length', 'WORDFINDER_MIN_WORD_LENGTH'),
            ('workers', 'WORDFINDER_WORKERS'),
        ):
            raw = os.environ.get(var)
            if raw:
                values[field] = raw
        return cls.model_validate(values)
