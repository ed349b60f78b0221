from __future__ import annotations

from typing import Optional

from servicedir.models.common import SDBaseModel


class Mall(SDBaseModel):
    id: str
    name: str
    province: str
    address: str = ""
    image_url: Optional[str] = None


class Shop(SDBaseModel):
    id: str
    name: str
    category: str
    floor: str = ""
    logo_url: Optional[str] = None
    description: str = ""
    phone: Optional[str] = None
    opening_hours: Optional[str] = None
    website: Optional[str] = None
    mall_id: str
    mall_name: str = ""
    province: str = ""


class MallEvent(SDBaseModel):
    id: str
    name: str
    description: str = ""
    date: str = ""
    image_url: Optional[str] = None
    mall_id: str
    mall_name: str = ""
    province: str = ""
