ICON_NAMES = (
    "Plane",
    "Landmark",
    "HeartPulse",
    "GraduationCap",
    "Car",
    "Banknote",
    "MountainSnow",
    "Home",
    "Briefcase",
    "Scale",
    "Users",
    "Phone",
    "Siren",
    "Building",
    "HeartHandshake",
    "ShieldCheck",
    "Mail",
    "MapPin",
)

DEFAULT_ICON = "Home"


def resolve_icon(name: str | None) -> str:
    return name if name in ICON_NAMES else DEFAULT_ICON
