"""Error kinds returned to callers of the tracker engine."""


class TrackerError(Exception):
    """Base class for every error the engine reports to its caller."""

    kind = 'tracker_error'
    status_code = 500

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}

    def to_dict(self):
        return {
            'error': self.kind,
            'message': self.message,
            'errors': self.errors,
        }


class UnsupportedPlatformError(TrackerError):
    """Extraction was asked for a platform with no rule set."""

    kind = 'unsupported_platform'
    status_code = 400


class EmptyInputError(TrackerError):
    """Raw posting text was blank."""

    kind = 'empty_input'
    status_code = 400


class RecordValidationError(TrackerError):
    """A record failed validation and was not persisted."""

    kind = 'validation_error'
    status_code = 400


class StorageError(TrackerError):
    """The record store could not complete the operation."""

    kind = 'storage_error'
    status_code = 503


class NotFoundError(TrackerError):
    """No record has the requested identifier."""

    kind = 'not_found'
    status_code = 404
