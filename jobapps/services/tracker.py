"""The operations the UI calls: extract, review, save, list and search."""

from collections.abc import Mapping

from flask import current_app
from marshmallow import ValidationError

from jobapps.errors import RecordValidationError
from jobapps.models import ApplicationRecord, SearchMode
from jobapps.schemas import ApplicationSaveSchema
from jobapps.services.extractors import extract
from jobapps.services.search import SearchEngine
from jobapps.services.store import get_store


def load_record(data):
    """Validate a record payload (dict or ApplicationRecord) for saving."""
    if isinstance(data, ApplicationRecord):
        data = data.to_dict()
    if not isinstance(data, Mapping):
        raise RecordValidationError('Application payload must be an object')
    try:
        return ApplicationSaveSchema().load(data)
    except ValidationError as err:
        raise RecordValidationError('Invalid application', errors=err.messages) from err


class JobTracker:
    """Extract, review, save workflow over one record store.

    Extraction only ever returns a draft. A record reaches the store solely
    through ``save_job_app``; two extractions of the same posting are two
    unrelated drafts.
    """

    def __init__(self, store):
        self.store = store
        self.search_engine = SearchEngine(store)

    def extract(self, raw_text, platform):
        """Draft record and extraction report for pasted posting text."""
        current_app.logger.info(
            f'Extracting {platform} posting ({len(raw_text or "")} characters)'
        )
        draft, report = extract(raw_text, platform)
        if report.missing:
            current_app.logger.debug(f'Fields not found: {", ".join(report.missing)}')
        return draft, report

    def track_job_app(self, raw_text, platform):
        draft, _ = self.extract(raw_text, platform)
        return draft

    def save_job_app(self, record):
        return self.store.save(load_record(record))

    def get_job_app(self, app_id):
        return self.store.get_by_id(app_id)

    def get_all_job_apps(self):
        return self.store.get_all()

    def delete_job_app(self, app_id):
        self.store.delete(app_id)

    def search(self, term, mode=SearchMode.COMPANY):
        results = self.search_engine.search(term, mode)
        current_app.logger.debug(f'Search {mode!s} {term!r}: {len(results)} results')
        return results

    def search_by_company(self, term):
        return self.search(term, SearchMode.COMPANY)


def get_tracker():
    """A JobTracker over the current app's record store."""
    return JobTracker(get_store())
