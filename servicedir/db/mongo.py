from motor.motor_asyncio import AsyncIOMotorClient

from servicedir.core.config import get_settings

settings = get_settings()

# motor connects lazily, on the first operation
client = AsyncIOMotorClient(settings.mongo_uri)
db = client[settings.mongo_db]

SERVICES = "services"
CATEGORIES = "categories"
REPORTS = "reports"
SUBMISSIONS = "submissions"
MALLS = "malls"
SHOPS = "shops"
MALL_EVENTS = "mall_events"
AUDIT_LOGS = "audit_logs"


def get_db():
    """
    FastAPI dependency that returns Mongo database instance
    """
    return db
