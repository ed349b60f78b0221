from bson import ObjectId

from servicedir.core.enums import ServiceStatus, ServiceType
from servicedir.core.icons import resolve_icon
from servicedir.models.directory import Mall, MallEvent, Shop
from servicedir.models.service import Service


def oid_str(x):
    return str(x) if isinstance(x, ObjectId) else x


def to_service(doc: dict) -> Service:
    """
    Normalize a stored service document into the engine's record.
    Older documents may lack status / steps / service_type.
    """
    steps = [s for s in (doc.get("steps") or []) if s]

    service_type = doc.get("service_type")
    if service_type not in (ServiceType.guide.value, ServiceType.info.value):
        service_type = ServiceType.guide.value if steps else ServiceType.info.value

    tags = doc.get("tags")

    return Service(
        id=oid_str(doc["_id"]),
        title=doc.get("title") or "",
        description=doc.get("description") or "",
        steps=steps,
        link=doc.get("link") or "",
        category_slug=doc.get("category_slug") or "",
        tags=list(tags) if tags is not None else None,
        country=doc.get("country") or "",
        state=doc.get("state") or None,
        status=doc.get("status") or ServiceStatus.published.value,
        verified=bool(doc.get("verified", False)),
        service_type=service_type,
        phone=doc.get("phone"),
        email=doc.get("email"),
        address=doc.get("address"),
        icon_data_uri=doc.get("icon_data_uri"),
        created_at=doc.get("created_at"),
        updated_at=doc.get("updated_at"),
    )


def to_service_out(doc: dict) -> dict:
    return to_service(doc).model_dump()


def to_category_out(doc: dict, services_count: int = 0) -> dict:
    return {
        "id": oid_str(doc["_id"]),
        "name": doc.get("name", ""),
        "slug": doc.get("slug", ""),
        # unknown icons fall back to the default one
        "icon_name": resolve_icon(doc.get("icon_name")),
        "services_count": services_count,
    }


def to_inquiry_out(doc: dict) -> dict:
    out = {k: v for k, v in doc.items() if k != "_id"}
    out["id"] = oid_str(doc["_id"])
    if "service_id" in out:
        out["service_id"] = oid_str(out["service_id"])
    return out


def to_mall(doc: dict) -> Mall:
    return Mall(id=doc["_id"], **{k: v for k, v in doc.items() if k != "_id"})


def to_shop(doc: dict) -> Shop:
    return Shop(id=doc["_id"], **{k: v for k, v in doc.items() if k != "_id"})


def to_event(doc: dict) -> MallEvent:
    return MallEvent(id=doc["_id"], **{k: v for k, v in doc.items() if k != "_id"})
