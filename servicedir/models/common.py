# servicedir/models/common.py
from __future__ import annotations

from bson import ObjectId
from pydantic import BaseModel


def parse_oid(x: str | None) -> ObjectId | None:
    if not x:
        return None
    x = x.strip()
    if not ObjectId.is_valid(x):
        return None
    return ObjectId(x)


class SDBaseModel(BaseModel):
    class Config:
        arbitrary_types_allowed = True
        populate_by_name = True
