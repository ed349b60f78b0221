from fastapi import Depends

from servicedir.core.category_tags import CategoryTags, get_category_tags
from servicedir.core.config import Settings, get_settings
from servicedir.db import mongo
from servicedir.db.mongo import get_db
from servicedir.repositories.audit_repository import AuditRepository
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.directory_repository import DirectoryRepository
from servicedir.repositories.inquiry_repository import InquiryRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.services.audit_service import AuditService
from servicedir.services.bulk_import import BulkImporter
from servicedir.services.catalog_service import CatalogService
from servicedir.services.categories_service import CategoryService
from servicedir.services.directory_service import DirectoryService
from servicedir.services.inquiry_service import InquiryService
from servicedir.services.service_admin import ServiceAdmin
from servicedir.services.text_generation import TextGenerator


def get_audit_service(db=Depends(get_db)) -> AuditService:
    return AuditService(AuditRepository(db[mongo.AUDIT_LOGS]))


def get_catalog_service(
    db=Depends(get_db),
    vocabulary: CategoryTags = Depends(get_category_tags),
) -> CatalogService:
    return CatalogService(
        ServiceRepository(db[mongo.SERVICES]),
        CategoryRepository(db[mongo.CATEGORIES]),
        vocabulary,
    )


def get_category_service(db=Depends(get_db), audit=Depends(get_audit_service)) -> CategoryService:
    return CategoryService(
        CategoryRepository(db[mongo.CATEGORIES]),
        ServiceRepository(db[mongo.SERVICES]),
        audit,
    )


def get_service_admin(db=Depends(get_db), audit=Depends(get_audit_service)) -> ServiceAdmin:
    return ServiceAdmin(
        ServiceRepository(db[mongo.SERVICES]),
        CategoryRepository(db[mongo.CATEGORIES]),
        audit,
    )


def get_directory_repo(db=Depends(get_db)) -> DirectoryRepository:
    return DirectoryRepository(db[mongo.MALLS], db[mongo.SHOPS], db[mongo.MALL_EVENTS])


def get_directory_service(repo=Depends(get_directory_repo)) -> DirectoryService:
    return DirectoryService(repo)


def get_inquiry_service(
    db=Depends(get_db),
    directory=Depends(get_directory_repo),
    audit=Depends(get_audit_service),
) -> InquiryService:
    return InquiryService(
        InquiryRepository(db[mongo.REPORTS], "reported_at"),
        InquiryRepository(db[mongo.SUBMISSIONS], "submitted_at"),
        ServiceRepository(db[mongo.SERVICES]),
        directory,
        audit,
    )


def get_text_generator(settings: Settings = Depends(get_settings)) -> TextGenerator:
    return TextGenerator(settings)


def get_bulk_importer(
    db=Depends(get_db),
    generator=Depends(get_text_generator),
    vocabulary: CategoryTags = Depends(get_category_tags),
    audit=Depends(get_audit_service),
    settings: Settings = Depends(get_settings),
) -> BulkImporter:
    return BulkImporter(
        ServiceRepository(db[mongo.SERVICES]),
        generator,
        vocabulary,
        audit,
        concurrency=settings.import_concurrency,
        with_icons=settings.generate_icons,
    )
