from fastapi import APIRouter, Query

from ..managers.finder import finder
from ..schemas import DictionaryStatus, FindWordsResult

router = APIRouter()


@router.get('/words', response_model=FindWordsResult)
async def find_words(letters: str = Query(..., description="Letters to build words from")):
    return await finder.find_words(letters)


@router.get('/dictionary', response_model=DictionaryStatus)
async def dictionary_status():
    return finder.status()


@router.post('/dictionary/reload', response_model=DictionaryStatus)
def reload_dictionary():
    # Sync route: the file read runs in the threadpool
    # LoadError goes through the app-level handler; the engine stays up with an empty list
    finder.load_dictionary()
    return finder.status()
