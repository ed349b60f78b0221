"""
Catalog query engine.

Pure filtering over an entity snapshot: the caller fetches services (or
shops / mall events) from the store and hands them here together with a
filter request. Matches are boolean; output keeps the snapshot order and
never repeats an id.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from servicedir.core.enums import ALL, ANY_STATE, QueryMode, ServiceStatus
from servicedir.core.errors import InvalidScope
from servicedir.models.directory import MallEvent, Shop
from servicedir.models.service import Service
from servicedir.schemas.query import (
    CatalogQuery,
    CatalogResult,
    DirectoryQuery,
    EventResult,
    ShopResult,
)

T = TypeVar("T")
Predicate = Callable[[T], bool]


def _fold(s: Optional[str]) -> str:
    return (s or "").casefold()


def _is_all(value: Optional[str]) -> bool:
    return value is None or value == "" or value == ALL


def contains_text(term: str, *fields: Optional[str]) -> bool:
    needle = _fold(term)
    return any(needle in _fold(f) for f in fields)


def resolve_mode(query: CatalogQuery) -> QueryMode:
    if query.category_slug and query.search_all:
        raise InvalidScope("Query names both a category and a catalog-wide search")
    if query.category_slug:
        return QueryMode.category
    if query.search_all:
        return QueryMode.search
    raise InvalidScope("Query must name a category or request a catalog-wide search")


# -------------------------
# Service predicates
# -------------------------
def visible_to(viewer_is_admin: bool) -> Predicate[Service]:
    def check(s: Service) -> bool:
        return viewer_is_admin or s.status != ServiceStatus.disabled
    return check


def in_category(slug: str) -> Predicate[Service]:
    return lambda s: s.category_slug == slug


def in_location(country: str, state: Optional[str]) -> Predicate[Service]:
    """
    Strict partition: a state filter never returns state-less services,
    and the unscoped view never returns state-bound ones.
    """
    def check(s: Service) -> bool:
        if s.country != country:
            return False
        if state == ANY_STATE:
            return True
        if state:
            return s.state == state
        return not s.state
    return check


def has_tag(tag: Optional[str]) -> Optional[Predicate[Service]]:
    if _is_all(tag):
        return None
    return lambda s: bool(s.tags) and tag in s.tags


def matches_text(term: Optional[str]) -> Optional[Predicate[Service]]:
    if not term:
        return None
    return lambda s: contains_text(term, s.title, s.description)


def _apply(items: Iterable[T], predicates: Sequence[Optional[Predicate[T]]], key: Callable[[T], str]) -> List[T]:
    active = [p for p in predicates if p is not None]
    seen = set()
    out: List[T] = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        if all(p(item) for p in active):
            seen.add(k)
            out.append(item)
    return out


def run_catalog_query(services: Sequence[Service], query: CatalogQuery) -> CatalogResult:
    mode = resolve_mode(query)

    # status first; later predicates only narrow further
    predicates: List[Optional[Predicate[Service]]] = [visible_to(query.viewer_is_admin)]
    if mode == QueryMode.category:
        predicates.append(in_category(query.category_slug))
        predicates.append(in_location(query.country, query.state))
    predicates.append(has_tag(query.tag))
    predicates.append(matches_text(query.search_term))

    items = _apply(services, predicates, key=lambda s: s.id)
    return CatalogResult(items=items, count=len(items), considered=len(services), mode=mode)


# -------------------------
# Shops / mall events
# -------------------------
def _directory_predicates(query: DirectoryQuery, text_fields: Callable) -> list:
    predicates = []
    if not _is_all(query.province):
        predicates.append(lambda x: x.province == query.province)
    if not _is_all(query.mall_id):
        predicates.append(lambda x: x.mall_id == query.mall_id)
    if query.search_term:
        predicates.append(lambda x: contains_text(query.search_term, *text_fields(x)))
    return predicates


def run_shop_query(shops: Sequence[Shop], query: DirectoryQuery) -> ShopResult:
    predicates = _directory_predicates(query, lambda s: (s.name, s.category))
    items = _apply(shops, predicates, key=lambda s: s.id)
    return ShopResult(items=items, count=len(items), considered=len(shops))


def run_event_query(events: Sequence[MallEvent], query: DirectoryQuery) -> EventResult:
    predicates = _directory_predicates(query, lambda e: (e.name, e.description))
    items = _apply(events, predicates, key=lambda e: e.id)
    return EventResult(items=items, count=len(items), considered=len(events))
