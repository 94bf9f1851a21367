"""Database models and record types."""

from jobapps.models.application import JobApplication
from jobapps.models.enums import Platform, RecordState, SearchMode, Status
from jobapps.models.record import (
    ApplicationRecord,
    EXTRACTED_FIELDS,
    NOT_FOUND,
    TEXT_FIELDS,
)

__all__ = [
    'JobApplication',
    'ApplicationRecord',
    'Platform',
    'RecordState',
    'SearchMode',
    'Status',
    'EXTRACTED_FIELDS',
    'NOT_FOUND',
    'TEXT_FIELDS',
]
