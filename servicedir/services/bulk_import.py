from __future__ import annotations

import asyncio
import csv
import io
import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from servicedir.core.category_tags import CategoryTags, tags_for
from servicedir.core.enums import ServiceStatus, ServiceType
from servicedir.core.errors import UpstreamFailure, ValidationFailure
from servicedir.core.regions import is_valid_location
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.schemas.imports import CsvRow, ImportReport, ImportRow
from servicedir.services.audit_service import AuditService
from servicedir.services.text_generation import TextGenerator

logger = logging.getLogger(__name__)

# spreadsheet exports use camelCase headers
HEADER_ALIASES = {"categoryslug": "category_slug", "category": "category_slug", "url": "link"}


def _norm_header(h: str) -> str:
    key = (h or "").strip()
    return HEADER_ALIASES.get(key.lower(), key.lower())


def parse_csv(text: str) -> List[ImportRow]:
    """
    Parse and validate an upload. Blank lines are skipped; each row is
    'pending' when it has a usable link and category, 'error' otherwise.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if reader.fieldnames:
        reader.fieldnames = [_norm_header(h) for h in reader.fieldnames]

    rows: List[ImportRow] = []
    for raw in reader:
        data = {k: (v or "").strip() for k, v in raw.items() if k}
        if not any(data.values()):
            continue
        line = reader.line_num
        try:
            CsvRow.model_validate(data)
        except ValidationError as exc:
            msg = "; ".join(
                f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            rows.append(ImportRow(line=line, data=data, status="error", error=msg or "Invalid row structure."))
            continue
        rows.append(ImportRow(line=line, data=data, status="pending"))
    return rows


class BulkImporter:
    def __init__(
        self,
        services: ServiceRepository,
        generator: TextGenerator,
        vocabulary: CategoryTags,
        audit: AuditService,
        concurrency: int = 4,
        with_icons: bool = False,
    ):
        self.services = services
        self.generator = generator
        self.vocabulary = vocabulary
        self.audit = audit
        self.concurrency = max(1, concurrency)
        self.with_icons = with_icons

    async def _summarize(self, row: ImportRow, sem: asyncio.Semaphore) -> None:
        link = row.data["link"]
        async with sem:
            try:
                row.summary = await self.generator.summarize_link(
                    link, tags_for(self.vocabulary, row.data["category_slug"])
                )
                if self.with_icons:
                    row.data["icon_data_uri"] = await self.generator.generate_icon(link)
            except UpstreamFailure as exc:
                logger.warning("Import row %d failed: %s", row.line, exc)
                row.status = "error"
                row.error = "AI summarization failed."
                return
        row.status = "success"

    async def run(self, text: str, country: str, state: Optional[str], actor: dict) -> ImportReport:
        if not is_valid_location(country, state):
            raise ValidationFailure([("state" if state else "country", "Unknown location")])

        rows = parse_csv(text)
        sem = asyncio.Semaphore(self.concurrency)
        await asyncio.gather(*(self._summarize(r, sem) for r in rows if r.status == "pending"))

        ok = [r for r in rows if r.status == "success"]
        docs: List[Dict] = []
        for r in ok:
            s = r.summary
            docs.append({
                "title": s.title,
                "description": s.description,
                "link": r.data["link"],
                "category_slug": r.data["category_slug"],
                "steps": s.steps,
                "tags": s.suggested_tags,
                "icon_data_uri": r.data.get("icon_data_uri"),
                "country": country,
                "state": state or None,
                "status": ServiceStatus.published.value,
                "verified": True,
                "service_type": (ServiceType.guide if s.steps else ServiceType.info).value,
                "phone": None,
                "email": None,
                "address": None,
            })

        try:
            ids = await self.services.create_many(docs)
        except UpstreamFailure as exc:
            logger.error("Bulk import of %d rows not saved: %s", len(docs), exc)
            raise
        for r, sid in zip(ok, ids):
            r.service_id = sid

        report = ImportReport(rows=rows, imported=len(ids), failed=len(rows) - len(ids))
        logger.info("Bulk import: %d imported, %d failed", report.imported, report.failed)

        if ids:
            await self.audit.record(
                actor, "service.import", {"type": "service", "id": "batch"},
                f"{len(ids)} services imported",
                {"country": country, "state": state, "service_ids": ids},
            )
        return report
