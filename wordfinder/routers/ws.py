from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from wordfinder.errors import WordFinderError
from wordfinder.managers.finder import finder
from wordfinder.schemas import ErrorPayload, FindWordsQuery

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()

    # Send initial dictionary state
    await websocket.send_json({"type": "status", **finder.status().model_dump()})

    try:
        while True:
            data = await websocket.receive_json()
            try:
                query = FindWordsQuery.model_validate(data)
            except ValidationError:
                error = ErrorPayload(code="invalid_input", message="Expected {\"letters\": <string>}")
                await websocket.send_json({"type": "error", **error.model_dump()})
                continue
            try:
                result = await finder.find_words(query.letters)
            except WordFinderError as exc:
                await websocket.send_json({"type": "error", **exc.to_payload()})
                continue
            await websocket.send_json({"type": "result", **result.model_dump(mode="json")})
    except WebSocketDisconnect:
        pass
