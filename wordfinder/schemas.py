from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Tuple


class WordCheckRequest(BaseModel):
    # One chunk of the dictionary plus the letter budget, handed to a single worker
    model_config = ConfigDict(frozen=True)

    words: Tuple[str, ...] = ()
    letterCount: Dict[str, int] = {}


class FindWordsQuery(BaseModel):
    letters: str


class FindWordsResult(BaseModel):
    query: str
    letters: str
    groups: Dict[int, List[str]] = {}
    totalCount: int = 0
    cached: bool = False


class DictionaryStatus(BaseModel):
    loaded: bool
    size: int = 0
    source: Optional[str] = None
    error: Optional[str] = None
    cachedQueries: int = 0
    minWordLength: int = Field(ge=1)
    maxInputLength: int = Field(ge=1)


class ErrorPayload(BaseModel):
    code: str
    message: str
