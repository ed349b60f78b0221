from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from servicedir.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

CategoryTags = Dict[str, List[str]]

DEFAULT_CATEGORY_TAGS: CategoryTags = {
    "business-and-corporate": [
        "Company registration & licensing",
        "Trade & export/import",
        "Small business support",
        "Business taxes & compliance",
        "Corporate governance",
        "Chambers of commerce & associations",
        "Investment & entrepreneurship",
        "Startups & innovation hubs",
    ],
    "communications": [
        "Postal services",
        "Telecommunications providers",
        "Internet & broadband",
        "Broadcasting & media regulation",
        "Freedom of information",
        "Digital services & e-Gov platforms",
    ],
    "consumer-and-rights": [
        "Consumer rights & complaints",
        "Product safety & recalls",
        "Fair trading & anti-fraud",
        "Data protection & privacy",
        "Ombudsman services",
        "Disability rights & protections",
        "Labor rights",
    ],
    "driving-and-transport": [
        "Driver licensing",
        "Vehicle registration",
        "Public transport",
        "Road safety & traffic rules",
        "Aviation (domestic flights)",
        "Railways",
        "Ports & shipping",
        "Ride-sharing & taxis",
    ],
    "education-and-training": [
        "Schools & K–12",
        "Colleges & universities",
        "Vocational training & skills",
        "Scholarships & financial aid",
        "Study abroad consultancies",
        "Online learning platforms",
        "Recognition of foreign qualifications",
    ],
    "emergency-services": [
        "Police & crime reporting",
        "Fire services",
        "Ambulance & paramedics",
        "Disaster preparedness & response",
        "Emergency hotlines (e.g. 000, 100)",
        "Missing persons & rescue services",
    ],
    "family-and-community": [
        "Births, deaths & marriages",
        "Childcare & parenting support",
        "Family law & custody",
        "Youth programs",
        "Senior citizen services",
        "Marriage registration",
        "Adoption services",
        "Religious & cultural organizations",
    ],
    "government-civic-duty": [
        "Voting & elections",
        "National ID & citizenship",
        "Passports",
        "Military & national service",
        "Local government councils & municipalities",
        "Transparency & open data",
    ],
    "health-and-medical": [
        "Hospitals & clinics",
        "Health insurance & Medicare (Aus) / Health schemes (Nepal)",
        "Mental health support",
        "Vaccinations & immunizations",
        "Pharmacies & medicine regulations",
        "Public health campaigns",
        "Disability services",
        "Emergency healthcare",
    ],
    "housing-and-property": [
        "Renting & tenancy rights",
        "Buying & selling property",
        "Housing loans & mortgages",
        "Land registration & ownership",
        "Building permits & zoning",
        "Public housing & subsidies",
        "Real estate agents",
    ],
    "legal-and-justice": [
        "Courts & judiciary",
        "Legal aid & free services",
        "Lawyers & law firms directories",
        "Civil & criminal law resources",
        "Police & crime laws",
        "Prisons & corrections",
        "Alternative dispute resolution (ADR)",
        "Anti-corruption agencies",
    ],
    "money-and-taxes": [
        "Personal taxation",
        "Business taxation",
        "Banking & financial institutions",
        "Loans & credit",
        "Superannuation / pensions",
        "Foreign exchange & remittances",
        "Budgeting & financial literacy",
        "Investment opportunities",
    ],
    "nepal-specific": [
        "Nepal embassies & consulates",
        "Provincial & local governments",
        "National symbols & identity (flag, anthem, heritage)",
        "Tourism boards & trekking permits",
        "Mountaineering associations",
        "Rural development programs",
    ],
    "social-and-community-support": [
        "NGOs & nonprofits",
        "Volunteer programs",
        "Community centers",
        "Homelessness services",
        "Welfare & allowances",
        "Food security programs",
        "Charities & donations",
    ],
    "visas-and-immigration": [
        "Tourist visas",
        "Student visas",
        "Work visas",
        "Skilled migration",
        "Permanent residency",
        "Citizenship application",
        "Refugee & humanitarian visas",
        "Immigration consultancies",
        "Border security & customs",
    ],
    "work-and-employment": [
        "Job portals & recruitment agencies",
        "Work rights & labor laws",
        "Professional licensing (engineers, nurses, etc.)",
        "Apprenticeships & internships",
        "Workplace safety",
        "Trade unions & workers’ associations",
        "Freelance & gig economy resources",
    ],
}


def load_category_tags(settings: Settings) -> CategoryTags:
    """
    Vocabulary precedence: inline CATEGORY_TAGS setting, then the
    CATEGORY_TAGS_FILE json file, then the built-in table.
    """
    if settings.category_tags:
        return {k: list(v) for k, v in settings.category_tags.items()}

    if settings.category_tags_file:
        path = Path(settings.category_tags_file)
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"{path} must contain a JSON object of slug -> tags")
        logger.info("Loaded tag vocabulary for %d categories from %s", len(raw), path)
        return {str(k): [str(t) for t in (v or [])] for k, v in raw.items()}

    return {k: list(v) for k, v in DEFAULT_CATEGORY_TAGS.items()}


@lru_cache
def get_category_tags() -> CategoryTags:
    # FastAPI dependency, loaded once per process
    return load_category_tags(get_settings())


def tags_for(vocabulary: CategoryTags, category_slug: str) -> List[str]:
    return list(vocabulary.get(category_slug, []))
