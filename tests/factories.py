from servicedir.models.directory import MallEvent, Shop
from servicedir.models.service import Service


def make_service(id_: str, **kw) -> Service:
    data = {
        "id": id_,
        "title": f"Service {id_}",
        "description": "",
        "link": f"https://example.gov/{id_}",
        "category_slug": "visas-and-immigration",
        "country": "AU",
    }
    data.update(kw)
    return Service(**data)


def make_shop(id_: str, mall_id: str = "civil-mall", province: str = "BAGMATI", **kw) -> Shop:
    data = {"id": id_, "name": f"Shop {id_}", "category": "Fashion", "mall_id": mall_id, "province": province}
    data.update(kw)
    return Shop(**data)


def make_event(id_: str, mall_id: str = "civil-mall", province: str = "BAGMATI", **kw) -> MallEvent:
    data = {"id": id_, "name": f"Event {id_}", "mall_id": mall_id, "province": province}
    data.update(kw)
    return MallEvent(**data)


VOCABULARY = {
    "visas-and-immigration": ["Student visas", "Work visas", "Citizenship"],
    "money-and-taxes": ["Personal taxation", "Superannuation"],
}

ADMIN = {"X-User-Id": "admin-1", "X-Role": "admin"}
VISITOR = {"X-User-Id": "visitor-1"}
