"""
Message endpoint models
"""

from typing import Literal

from pydantic import BaseModel


class MessageRequest(BaseModel):
    message: str = ""


class ResponseEnvelope(BaseModel):
    """Status wrapper returned by the message endpoint"""
    status: Literal["success", "fail"]
    message: str
