from pymongo.errors import DuplicateKeyError

from servicedir.models.category import CategoryDB
from servicedir.models.common import parse_oid


class CategoryRepository:
    def __init__(self, col):
        self.col = col

    async def create_indexes(self):
        # one live category per slug; deleted ones keep their slug
        await self.col.create_index(
            "slug",
            unique=True,
            partialFilterExpression={"deleted": False},
            name="slug_live_unique",
        )

    async def list(self):
        cur = self.col.find({"deleted": False}).sort("name", 1)
        return [d async for d in cur]

    async def get(self, category_id: str):
        oid = parse_oid(category_id)
        if oid is None:
            return None
        return await self.col.find_one({"_id": oid, "deleted": False})

    async def get_by_slug(self, slug: str):
        return await self.col.find_one({"slug": slug, "deleted": False})

    async def create(self, data: CategoryDB):
        doc = data.model_dump()
        try:
            r = await self.col.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ValueError("Category slug already exists") from exc
        doc["_id"] = r.inserted_id
        return doc

    async def delete(self, category_id: str) -> bool:
        r = await self.col.update_one(
            {"_id": parse_oid(category_id), "deleted": False},
            {"$set": {"deleted": True}},
        )
        return r.modified_count == 1

    async def count(self) -> int:
        return await self.col.count_documents({"deleted": False})
