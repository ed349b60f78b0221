from __future__ import annotations

from typing import Any, Collection, Dict, List, Tuple

from pydantic import TypeAdapter, ValidationError

from servicedir.core.enums import SubmissionType
from servicedir.core.errors import ValidationFailure
from servicedir.models.submission import Submission

_adapter = TypeAdapter(Submission)

VARIANT_TAGS = {t.value for t in SubmissionType}


def _field_of(loc: tuple) -> str:
    # discriminated union locations start with the variant tag
    parts = [str(p) for p in loc]
    if parts and parts[0] in VARIANT_TAGS:
        parts = parts[1:]
    return ".".join(parts) or "submission_type"


def _violations(exc: ValidationError) -> List[Tuple[str, str]]:
    out = []
    for err in exc.errors():
        msg = err["msg"]
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append((_field_of(err["loc"]), msg))
    return out


def validate_submission(payload: Dict[str, Any], mall_ids: Collection[str]):
    """
    Validate a contribution payload against the variant named by its
    ``submission_type``. Rejects the whole payload with every violation
    found; never returns a partially valid submission.
    """
    violations: List[Tuple[str, str]] = []
    submission = None

    try:
        submission = _adapter.validate_python(payload)
    except ValidationError as exc:
        violations.extend(_violations(exc))

    kind = payload.get("submission_type") if isinstance(payload, dict) else None
    if kind in (SubmissionType.shop.value, SubmissionType.event.value):
        mall_id = payload.get("mall_id")
        already = any(f == "mall_id" for f, _ in violations)
        if isinstance(mall_id, str) and mall_id and not already and mall_id not in mall_ids:
            violations.append(("mall_id", f"Unknown mall ({mall_id})"))

    if violations:
        raise ValidationFailure(violations)
    return submission
