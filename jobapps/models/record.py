"""In-memory application record exchanged between the engine and the UI."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional

from jobapps.models.enums import RecordState, Status

NOT_FOUND = 'not found'

# Fields an extractor tries to fill; each ends up as a value or NOT_FOUND.
EXTRACTED_FIELDS = (
    'company',
    'position',
    'location',
    'salary_range',
    'workplace_type',
)

# Fields matched by full-text search.
TEXT_FIELDS = EXTRACTED_FIELDS + ('notes',)


@dataclass
class ApplicationRecord:
    """A job application, either a draft awaiting review or a saved record.

    ``app_id`` and ``date_applied`` are assigned by the record store on the
    first save and never change afterwards. A record without ``app_id`` is
    a draft; nothing persists it except an explicit save.
    """

    company: str = NOT_FOUND
    position: str = NOT_FOUND
    location: str = NOT_FOUND
    salary_range: str = NOT_FOUND
    workplace_type: str = NOT_FOUND
    status: Optional[Status] = None
    notes: str = ''
    website: Optional[str] = None
    platform: Optional[str] = None
    app_id: Optional[int] = None
    date_applied: Optional[datetime] = field(default=None, compare=False)

    @property
    def state(self) -> RecordState:
        return RecordState.DRAFT if self.app_id is None else RecordState.SAVED

    @property
    def is_draft(self) -> bool:
        return self.state is RecordState.DRAFT

    def to_dict(self):
        """Plain dict of every field, enums as their values."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['status'] = getattr(data['status'], 'value', data['status'])
        return data
