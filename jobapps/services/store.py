"""Durable storage of job application records."""

import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from jobapps.errors import NotFoundError, StorageError
from jobapps.extensions import db
from jobapps.models import JobApplication, Status
from jobapps.services.normalizer import normalize, parse_status


class RecordStore:
    """Keyed store of JobApplication rows.

    Every call holds one process-wide lock, so a reader sees a save either
    fully applied or not at all. Waiting longer than ``lock_timeout`` for
    the lock, or any database failure, raises StorageError.
    """

    def __init__(self, lock_timeout=5.0):
        self.lock_timeout = lock_timeout
        self._lock = threading.RLock()

    @contextmanager
    def _locked(self, action):
        if not self._lock.acquire(timeout=self.lock_timeout):
            current_app.logger.error(f'Record store busy, gave up on {action}')
            raise StorageError(f'Timed out waiting for the record store to {action}')
        try:
            yield
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'Record store failed to {action}: {e}')
            raise StorageError(f'Failed to {action}') from e
        finally:
            self._lock.release()

    def save(self, record):
        """Insert a draft or overwrite a saved record; return the stored copy.

        A draft gets a new app_id, a date_applied of now and, when no status
        was set, SUBMITTED. A record with an app_id replaces the stored one
        but keeps its date_applied, and keeps its status if none was given.
        """
        status = parse_status(record.status)
        record = normalize(replace(record, status=status))

        with self._locked('save application'):
            if record.is_draft:
                row = JobApplication(date_applied=datetime.utcnow())
                row.apply_record(record)
                if record.status is None:
                    row.status = Status.SUBMITTED.value
                db.session.add(row)
                action = 'Created'
            else:
                row = db.session.get(JobApplication, record.app_id)
                if row is None:
                    raise NotFoundError(f'No application with id {record.app_id}')
                row.apply_record(record)
                action = 'Updated'
            db.session.commit()
            saved = row.to_record()

        current_app.logger.info(f'{action} application {saved.app_id}: {saved.position} at {saved.company}')
        return saved

    def get_all(self):
        """All records in insertion order."""
        with self._locked('list applications'):
            rows = JobApplication.query.order_by(JobApplication.app_id.asc()).all()
            records = [row.to_record() for row in rows]
        current_app.logger.debug(f'Listed {len(records)} applications')
        return records

    def get_by_id(self, app_id):
        with self._locked('get application'):
            row = db.session.get(JobApplication, app_id)
            if row is None:
                raise NotFoundError(f'No application with id {app_id}')
            return row.to_record()

    def find(self, condition):
        """Records matching a SQL condition, most recently applied first."""
        with self._locked('search applications'):
            rows = (
                JobApplication.query
                .filter(condition)
                .order_by(JobApplication.date_applied.desc(), JobApplication.app_id.desc())
                .all()
            )
            return [row.to_record() for row in rows]

    def delete(self, app_id):
        with self._locked('delete application'):
            row = db.session.get(JobApplication, app_id)
            if row is None:
                raise NotFoundError(f'No application with id {app_id}')
            db.session.delete(row)
            db.session.commit()
        current_app.logger.info(f'Deleted application {app_id}')

    def count(self):
        with self._locked('count applications'):
            return JobApplication.query.count()


def get_store():
    """The RecordStore bound to the current app."""
    return current_app.extensions['record_store']
