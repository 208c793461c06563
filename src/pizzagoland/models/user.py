"""
User-related Pydantic models
"""

import re
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field, field_validator

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

# BSON stores integers as at most 64 bits
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_object_id(value: str) -> ObjectId:
    """Convert a 24-character hex string to an ObjectId.

    Raises:
        InvalidId: if the value is not a valid ObjectId hex string
    """
    if not isinstance(value, str) or not OBJECT_ID_PATTERN.fullmatch(value):
        raise InvalidId(f"{value!r} is not a valid ObjectId, it must be a 24-character hex string")
    return ObjectId(value)


class User(BaseModel):
    """A user record as exchanged over HTTP.

    Fields missing from a request body fall back to their zero values,
    unknown fields are ignored and wrong JSON types are rejected.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str = Field(default="", strict=True)
    age: int = Field(default=0, strict=True, ge=INT64_MIN, le=INT64_MAX)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        try:
            return str(parse_object_id(value))
        except InvalidId as e:
            raise ValueError(str(e)) from e

    def to_document(self) -> Dict[str, Any]:
        """Build the MongoDB document for this user"""
        document: Dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = ObjectId(self.id)
        document["name"] = self.name
        document["age"] = self.age
        return document

    def update_fields(self) -> Dict[str, Any]:
        """Fields written by a full-document update (never the id)"""
        return {"name": self.name, "age": self.age}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        return cls(
            id=str(document["_id"]),
            name=document.get("name", ""),
            age=document.get("age", 0),
        )
