from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from servicedir.api.deps import get_bulk_importer
from servicedir.core.security import Viewer, get_current_admin
from servicedir.schemas.imports import ImportReport, ImportRow
from servicedir.services.bulk_import import BulkImporter, parse_csv

router = APIRouter(
    prefix="/admin/bulk-import",
    tags=["Admin - Bulk Import"],
    dependencies=[Depends(get_current_admin)],
)

CSV_TYPES = {"text/csv", "application/vnd.ms-excel", "application/octet-stream"}


async def _read_csv(file: UploadFile) -> str:
    if file.content_type not in CSV_TYPES and not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(400, "Please upload a CSV file.")
    raw = await file.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HTTPException(400, "CSV must be UTF-8 encoded") from exc


@router.post("/preview", response_model=list[ImportRow])
async def preview(file: UploadFile = File(...)):
    return parse_csv(await _read_csv(file))


@router.post("", response_model=ImportReport)
async def run_import(
    file: UploadFile = File(...),
    country: str = Form("AU"),
    state: Optional[str] = Form(None),
    admin: Viewer = Depends(get_current_admin),
    importer: BulkImporter = Depends(get_bulk_importer),
):
    text = await _read_csv(file)
    return await importer.run(text, country, state or None, admin.actor)
