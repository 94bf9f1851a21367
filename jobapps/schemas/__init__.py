"""Marshmallow schemas for validation and serialization."""

from jobapps.schemas.application import ApplicationSchema, ApplicationSaveSchema, TrackRequestSchema

__all__ = [
    'ApplicationSchema',
    'ApplicationSaveSchema',
    'TrackRequestSchema',
]
