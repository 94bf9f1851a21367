"""Job Application model."""

from datetime import datetime

from jobapps.extensions import db
from jobapps.models.enums import Status
from jobapps.models.record import ApplicationRecord, NOT_FOUND


class JobApplication(db.Model):
    """Persisted job application row."""

    __tablename__ = 'apps'

    app_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    company = db.Column(db.String(255), nullable=False, default=NOT_FOUND)
    position = db.Column(db.String(255), nullable=False, default=NOT_FOUND)
    location = db.Column(db.String(255), nullable=False, default=NOT_FOUND)
    salary_range = db.Column(db.String(255), nullable=False, default=NOT_FOUND)
    workplace_type = db.Column(db.String(50), nullable=False, default=NOT_FOUND)
    status = db.Column(db.String(50), nullable=False, default=Status.SUBMITTED.value)
    notes = db.Column(db.Text, nullable=False, default='')
    website = db.Column(db.String(500), nullable=True)
    platform = db.Column(db.String(20), nullable=True)  # linkedin, greenhouse
    date_applied = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<JobApplication {self.app_id} {self.company} - {self.position}>'

    def apply_record(self, record):
        """Copy the user-editable fields of an ApplicationRecord onto this row."""
        self.company = record.company
        self.position = record.position
        self.location = record.location
        self.salary_range = record.salary_range
        self.workplace_type = record.workplace_type
        self.notes = record.notes
        self.website = record.website
        self.platform = record.platform
        if record.status is not None:
            self.status = Status(record.status).value

    def to_record(self):
        """Detached copy of this row."""
        return ApplicationRecord(
            app_id=self.app_id,
            company=self.company,
            position=self.position,
            location=self.location,
            salary_range=self.salary_range,
            workplace_type=self.workplace_type,
            status=Status(self.status),
            notes=self.notes,
            website=self.website,
            platform=self.platform,
            date_applied=self.date_applied,
        )
