from enum import Enum

ALL = "ALL"
ANY_STATE = "*"


class UserRole(str, Enum):
    admin = "admin"
    visitor = "visitor"


class ServiceStatus(str, Enum):
    published = "published"
    disabled = "disabled"


class ServiceType(str, Enum):
    guide = "guide"
    info = "info"


class InquiryStatus(str, Enum):
    pending = "pending"
    resolved = "resolved"


class SubmissionType(str, Enum):
    service = "service"
    shop = "shop"
    event = "event"


class QueryMode(str, Enum):
    category = "category"
    search = "search"
