from __future__ import annotations
import logging
from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import LoadError, WordFinderError
from .managers.finder import finder
from .schemas import ErrorPayload
from .routers import words, ws

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One-time blocking load; a failure leaves the engine up with an empty dictionary
    try:
        finder.load_dictionary()
    except LoadError:
        logger.warning("Starting with an empty dictionary")
    yield
    finder.evaluator.shutdown()


# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = FastAPI(title="Word Finder Server", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(words.router)
app.include_router(ws.router)


@app.exception_handler(WordFinderError)
async def word_finder_error_handler(request: Request, exc: WordFinderError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth):
    await sio.emit('pong', to=sid)


@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)


@sio.on('dictionary:status')
async def dictionary_status(sid):
    await sio.emit('dictionary:status', finder.status().model_dump(), to=sid)


@sio.on('words:find')
async def find_words(sid, payload):
    # Accept either a bare string or {"letters": str}
    letters = payload.get('letters') if isinstance(payload, dict) else payload
    if not isinstance(letters, str):
        error = ErrorPayload(code='invalid_input', message='Expected a string of letters')
        await sio.emit('words:error', error.model_dump(), to=sid)
        return
    try:
        result = await finder.find_words(letters)
    except WordFinderError as exc:
        await sio.emit('words:error', exc.to_payload(), to=sid)
        return
    await sio.emit('words:result', result.model_dump(mode='json'), to=sid)


# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordfinder.main:application --reload --host 0.0.0.0 --port 8000
