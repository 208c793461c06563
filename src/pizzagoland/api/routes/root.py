"""
Root welcome route
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ALL_METHODS, response_class=PlainTextResponse)
async def welcome():
    return "Welcome to the PizzaGoland API!"
