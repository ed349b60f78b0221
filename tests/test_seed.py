from servicedir.db import mongo
from servicedir.jobs.seed_directory import DEFAULT_CATEGORIES, seed_directory
from servicedir.repositories.directory_repository import DirectoryRepository


async def test_seed_loads_demo_directory(db):
    counts = await seed_directory(db)

    assert counts == {"malls": 4, "shops": 16, "events": 6, "categories": len(DEFAULT_CATEGORIES)}
    repo = DirectoryRepository(db[mongo.MALLS], db[mongo.SHOPS], db[mongo.MALL_EVENTS])
    assert sorted(await repo.mall_ids()) == ["city-centre", "civil-mall", "kl-tower", "pokhara-trade-mall"]

    shop = await db[mongo.SHOPS].find_one({"_id": "pokhara-trade-mall-0"})
    assert shop["name"] == "Himalayan Java"
    assert shop["province"] == "GANDAKI"
    assert shop["mall_name"] == "Pokhara Trade Mall"


async def test_seed_is_idempotent(db):
    await seed_directory(db)
    second = await seed_directory(db)

    assert second["categories"] == 0
    assert await db[mongo.MALLS].count_documents({}) == 4
    assert await db[mongo.SHOPS].count_documents({}) == 16
    assert await db[mongo.MALL_EVENTS].count_documents({}) == 6
    assert await db[mongo.CATEGORIES].count_documents({}) == len(DEFAULT_CATEGORIES)
