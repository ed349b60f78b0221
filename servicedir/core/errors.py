from __future__ import annotations

from typing import List, Tuple


class CatalogError(Exception):
    """Base class for errors raised by the directory services."""


class NotFound(CatalogError):
    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found ({key})")


class InvalidScope(CatalogError):
    """A query named both entry modes (or neither)."""


class ValidationFailure(CatalogError):
    """
    Carries every field-level violation of a rejected payload,
    as (field, message) pairs.
    """

    def __init__(self, violations: List[Tuple[str, str]]):
        self.violations = list(violations)
        fields = ", ".join(f for f, _ in self.violations) or "payload"
        super().__init__(f"Invalid fields: {fields}")

    def as_dict(self) -> dict:
        return {
            "violations": [
                {"field": field, "message": message}
                for field, message in self.violations
            ]
        }


class UpstreamFailure(CatalogError):
    def __init__(self, upstream: str, reason: str):
        self.upstream = upstream
        self.reason = reason
        super().__init__(f"{upstream} unavailable: {reason}")
