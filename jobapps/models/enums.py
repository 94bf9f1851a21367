"""Closed value sets shared by the engine and the API."""

import enum


class ValuesMixin:
    @classmethod
    def values(cls):
        return [member.value for member in cls]


class Status(ValuesMixin, str, enum.Enum):
    """Where an application stands. Any value may follow any other."""

    SUBMITTED = 'SUBMITTED'
    REJECTED = 'REJECTED'
    PHONE_SCREEN = 'PHONE_SCREEN'
    REMOTE_INTERVIEW = 'REMOTE_INTERVIEW'
    ON_SITE_INTERVIEW = 'ON_SITE_INTERVIEW'


class Platform(ValuesMixin, str, enum.Enum):
    """Job boards with an extraction rule set."""

    LINKEDIN = 'linkedin'
    GREENHOUSE = 'greenhouse'


class SearchMode(ValuesMixin, str, enum.Enum):
    COMPANY = 'company'
    POSITION = 'position'
    FULL_TEXT = 'full_text'


class RecordState(str, enum.Enum):
    """DRAFT records have never been saved; SAVED records carry an app_id."""

    DRAFT = 'draft'
    SAVED = 'saved'
