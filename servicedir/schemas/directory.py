from typing import List, Optional

from pydantic import BaseModel

from servicedir.models.directory import Mall, MallEvent, Shop


class MallPage(BaseModel):
    mall: Mall
    location_name: Optional[str] = None
    shops: List[Shop]
    events: List[MallEvent]
