"""Schemas for job application validation and serialization."""

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from jobapps.models import ApplicationRecord, Platform, Status


class TrackRequestSchema(Schema):
    """Pasted posting text plus the platform it came from."""

    raw_text = fields.String(load_default='')
    platform = fields.String(load_default='')


class ApplicationSaveSchema(Schema):
    """Schema for a reviewed record sent back for saving.

    Read-only fields such as date_applied are dropped on load.
    """

    class Meta:
        unknown = EXCLUDE

    app_id = fields.Integer(allow_none=True, load_default=None, strict=True)
    company = fields.String(allow_none=True, load_default=None)
    position = fields.String(allow_none=True, load_default=None)
    location = fields.String(allow_none=True, load_default=None)
    salary_range = fields.String(allow_none=True, load_default=None)
    workplace_type = fields.String(allow_none=True, load_default=None)
    status = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.OneOf(Status.values()),
    )
    notes = fields.String(allow_none=True, load_default=None)
    website = fields.String(allow_none=True, load_default=None, validate=validate.Length(max=500))
    platform = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.OneOf(Platform.values()),
    )

    @post_load
    def make_record(self, data, **kwargs):
        if data['status'] is not None:
            data['status'] = Status(data['status'])
        return ApplicationRecord(**data)


class ApplicationSchema(Schema):
    """Schema for serializing application records."""

    app_id = fields.Integer(dump_only=True)
    company = fields.String()
    position = fields.String()
    location = fields.String()
    salary_range = fields.String()
    workplace_type = fields.String()
    status = fields.Enum(Status, by_value=True, allow_none=True)
    notes = fields.String()
    website = fields.String(allow_none=True)
    platform = fields.String(allow_none=True)
    date_applied = fields.DateTime(dump_only=True)
    state = fields.Function(lambda record: record.state.value, dump_only=True)
