from typing import Any, Dict, Iterable, List, Optional

# bookkeeping fields never reported as edits
IGNORED_FIELDS = {"_id", "created_at", "updated_at", "deleted"}


def tag_changes(before: Optional[Iterable[str]], after: Optional[Iterable[str]]) -> Dict[str, List[str]]:
    """Added / removed tags, each in the order they appear."""
    old = list(before or [])
    new = list(after or [])
    return {
        "added": [t for t in new if t not in old],
        "removed": [t for t in old if t not in new],
    }


def changed_fields(before: Dict[str, Any], after: Dict[str, Any]) -> List[str]:
    return sorted(
        k for k, v in after.items()
        if k not in IGNORED_FIELDS and before.get(k) != v
    )
