"""
JSON message route
Accepts a message by POST and answers with a status envelope. Nothing is persisted.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from pizzagoland.api.routes.root import ALL_METHODS
from pizzagoland.models.message import MessageRequest, ResponseEnvelope

router = APIRouter()
logger = logging.getLogger(__name__)


def send_response(status: str, message: str, status_code: int, headers=None) -> JSONResponse:
    envelope = ResponseEnvelope(status=status, message=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(), headers=headers)


@router.api_route("/json", methods=ALL_METHODS)
async def handle_message(request: Request):
    """Receive a JSON message (POST) or describe usage (GET)"""
    if request.method == "POST":
        try:
            payload = MessageRequest.model_validate_json(await request.body())
        except ValidationError:
            return send_response("fail", "Invalid JSON message", 400)

        if not payload.message:
            return send_response("fail", "Invalid JSON message", 400)

        logger.info(f"Received message: {payload.message}")
        return send_response("success", "Data received successfully", 200)

    elif request.method == "GET":
        return send_response("success", "Use POST to send data", 200)

    return send_response("fail", "Method not supported", 405, headers={"Allow": "GET, POST"})
