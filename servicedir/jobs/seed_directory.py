from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

from servicedir.core.config import get_settings
from servicedir.core.logging_config import setup_logging
from servicedir.db import mongo
from servicedir.models.category import CategoryDB
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.directory_repository import DirectoryRepository

logger = logging.getLogger(__name__)

MALLS: List[Dict[str, Any]] = [
    {
        "_id": "civil-mall",
        "name": "Civil Mall",
        "province": "BAGMATI",
        "address": "Sundhara, Kathmandu, Nepal",
        "image_url": "https://picsum.photos/seed/mall1/800/400",
    },
    {
        "_id": "city-centre",
        "name": "City Centre",
        "province": "BAGMATI",
        "address": "Kamal Pokhari, Kathmandu, Nepal",
        "image_url": "https://picsum.photos/seed/mall2/800/400",
    },
    {
        "_id": "kl-tower",
        "name": "KL Tower & Mall",
        "province": "BAGMATI",
        "address": "Chuchchepati, Kathmandu, Nepal",
        "image_url": "https://picsum.photos/seed/mall3/800/400",
    },
    {
        "_id": "pokhara-trade-mall",
        "name": "Pokhara Trade Mall",
        "province": "GANDAKI",
        "address": "Chipledhunga, Pokhara, Nepal",
        "image_url": "https://picsum.photos/seed/mall4/800/400",
    },
]

# (name, category, floor, logo seed, description)
SHOPS: Dict[str, List[tuple]] = {
    "civil-mall": [
        ("KFC", "Food & Beverage", "Ground Floor", "kfc", "Finger Lickin' Good chicken."),
        ("Levi's Store", "Fashion", "First Floor", "levis", "Original and authentic jeanswear."),
        ("Samsung Plaza", "Electronics", "Second Floor", "samsung", "Latest Samsung smartphones and electronics."),
        ("QFX Cinemas", "Entertainment", "Top Floor", "qfx", "The best movie watching experience."),
    ],
    "city-centre": [
        ("Pizza Hut", "Food & Beverage", "Third Floor", "pizzahut", "Pizzas, pastas, and more."),
        ("Adidas", "Fashion", "First Floor", "adidas", "Sportswear, shoes, and accessories."),
        ("Apple Store (Authorized Reseller)", "Electronics", "Second Floor", "apple",
         "Get your latest Apple products here."),
        ("Funland", "Entertainment", "Third Floor", "funland", "Gaming zone for all ages."),
    ],
    "kl-tower": [
        ("Baskin Robbins", "Food & Beverage", "Ground Floor", "baskin", "31 flavors of ice cream."),
        ("Miniso", "Services", "First Floor", "miniso", "Affordable and quality lifestyle products."),
        ("Dell Exclusive Store", "Electronics", "Second Floor", "dell", "Laptops, desktops, and accessories from Dell."),
        ("Big Movies", "Entertainment", "Top Floor", "bigmovies", "Luxury cinema experience."),
    ],
    "pokhara-trade-mall": [
        ("Himalayan Java", "Food & Beverage", "Ground Floor", "java", "Specialty coffee from the Himalayas."),
        ("Bata Shoes", "Fashion", "First Floor", "bata", "Footwear for the entire family."),
        ("The Face Shop", "Health & Beauty", "Ground Floor", "faceshop", "Korean beauty products."),
        ("Customer Service Desk", "Services", "Ground Floor", "service", "Mall information and support."),
    ],
}

# (name, description, date, image seed)
EVENTS: Dict[str, List[tuple]] = {
    "civil-mall": [
        ("Dashain Shopping Festival", "Get up to 50% off on major brands this Dashain!", "Oct 1 - Oct 15", "event1"),
        ("Live Music with The Edge Band", "Enjoy a live performance by The Edge Band this Friday night.",
         "Every Friday, 7 PM", "event2"),
    ],
    "city-centre": [
        ("Winter Wonderland", "Experience a magical winter setup with artificial snow and decorations.",
         "Dec 15 - Jan 15", "event3"),
        ("Kids Fun Fair", "Fun activities, games, and magic shows for children.", "Every Saturday", "event5"),
    ],
    "kl-tower": [
        ("Food Festival", "Taste delicacies from over 20 different food stalls.", "Nov 5 - Nov 12", "event4"),
    ],
    "pokhara-trade-mall": [
        ("Local Handicrafts Exhibition", "Explore and buy authentic local handicrafts from Gandaki province.",
         "Sep 20 - Sep 27", "event6"),
    ],
}

# (name, slug, icon)
DEFAULT_CATEGORIES = [
    ("Business & Corporate", "business-and-corporate", "Briefcase"),
    ("Communications", "communications", "Phone"),
    ("Consumer & Rights", "consumer-and-rights", "ShieldCheck"),
    ("Driving & Transport", "driving-and-transport", "Car"),
    ("Education & Training", "education-and-training", "GraduationCap"),
    ("Emergency Services", "emergency-services", "Siren"),
    ("Family & Community", "family-and-community", "Users"),
    ("Government & Civic Duty", "government-civic-duty", "Landmark"),
    ("Health & Medical", "health-and-medical", "HeartPulse"),
    ("Housing & Property", "housing-and-property", "Home"),
    ("Legal & Justice", "legal-and-justice", "Scale"),
    ("Money & Taxes", "money-and-taxes", "Banknote"),
    ("Nepal Specific", "nepal-specific", "MountainSnow"),
    ("Social & Community Support", "social-and-community-support", "HeartHandshake"),
    ("Visas & Immigration", "visas-and-immigration", "Plane"),
    ("Work & Employment", "work-and-employment", "Building"),
]


def _shop_docs(mall: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [
        {
            "_id": f"{mall['_id']}-{i}",
            "name": name,
            "category": category,
            "floor": floor,
            "logo_url": f"https://picsum.photos/seed/{seed}/100/100",
            "description": description,
            "mall_id": mall["_id"],
            "mall_name": mall["name"],
            "province": mall["province"],
        }
        for i, (name, category, floor, seed, description) in enumerate(SHOPS.get(mall["_id"], []))
    ]


def _event_docs(mall: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [
        {
            "_id": f"{mall['_id']}-event-{i}",
            "name": name,
            "description": description,
            "date": date,
            "image_url": f"https://picsum.photos/seed/{seed}/600/300",
            "mall_id": mall["_id"],
            "mall_name": mall["name"],
            "province": mall["province"],
        }
        for i, (name, description, date, seed) in enumerate(EVENTS.get(mall["_id"], []))
    ]


async def seed_directory(db) -> Dict[str, int]:
    """
    Upsert the demo malls, their shops and events, and the default
    categories. Safe to run repeatedly; ids are stable.
    """
    directory = DirectoryRepository(db[mongo.MALLS], db[mongo.SHOPS], db[mongo.MALL_EVENTS])
    categories = CategoryRepository(db[mongo.CATEGORIES])
    await categories.create_indexes()
    counts = {"malls": 0, "shops": 0, "events": 0, "categories": 0}

    for mall in MALLS:
        await directory.upsert("malls", dict(mall))
        counts["malls"] += 1
        for shop in _shop_docs(mall):
            await directory.upsert("shops", shop)
            counts["shops"] += 1
        for event in _event_docs(mall):
            await directory.upsert("events", event)
            counts["events"] += 1

    for name, slug, icon in DEFAULT_CATEGORIES:
        if await categories.get_by_slug(slug):
            continue
        await categories.create(CategoryDB(name=name, slug=slug, icon_name=icon))
        counts["categories"] += 1

    logger.info(
        "Seeded %d malls, %d shops, %d events, %d new categories",
        counts["malls"], counts["shops"], counts["events"], counts["categories"],
    )
    return counts


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    asyncio.run(seed_directory(mongo.db))
