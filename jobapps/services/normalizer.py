"""Clean extracted or user-edited records before they are shown or stored."""

import re
from dataclasses import replace
from typing import Optional

from jobapps.errors import RecordValidationError
from jobapps.models.enums import Status
from jobapps.models.record import ApplicationRecord, EXTRACTED_FIELDS, NOT_FOUND
from jobapps.services.markup import decode_entities

_WHITESPACE = re.compile(r'\s+')
_TAG = re.compile(r'<[^>]*>')
# Tag fragments cut off at either end of a captured run, e.g. 'Acme</a' or 'class="x">Acme'
_DANGLING_TAG_END = re.compile(r'<[^>]*$')
_DANGLING_TAG_START = re.compile(r'^[^<]*?(?:"|/)\s*>')
_ENTITY = re.compile(r'&(?:[a-zA-Z]+|#\d+|#x[0-9a-fA-F]+);')

# Separators and bullets that label-based capture leaves at the edges
_EDGE_PUNCTUATION = ' \t:;,|·•-–—>'

_STATUS_ALIASES = {
    'applied': Status.SUBMITTED,
    'submitted': Status.SUBMITTED,
    'application_submitted': Status.SUBMITTED,
    'rejected': Status.REJECTED,
    'not_selected': Status.REJECTED,
    'declined': Status.REJECTED,
    'phone_screen': Status.PHONE_SCREEN,
    'phone_interview': Status.PHONE_SCREEN,
    'screening': Status.PHONE_SCREEN,
    'remote_interview': Status.REMOTE_INTERVIEW,
    'virtual_interview': Status.REMOTE_INTERVIEW,
    'video_interview': Status.REMOTE_INTERVIEW,
    'on_site_interview': Status.ON_SITE_INTERVIEW,
    'onsite_interview': Status.ON_SITE_INTERVIEW,
    'onsite': Status.ON_SITE_INTERVIEW,
}

_WORKPLACE_TYPES = {
    'remote': 'Remote',
    'hybrid': 'Hybrid',
    'on-site': 'On-site',
    'onsite': 'On-site',
    'on site': 'On-site',
    'in-office': 'On-site',
    'in office': 'On-site',
}


def clean_text(value) -> Optional[str]:
    """Strip markup residue, collapse whitespace and trim edge punctuation.

    Returns None when nothing meaningful is left.
    """
    if value is None:
        return None
    text = str(value)
    text = _TAG.sub(' ', text)
    text = _DANGLING_TAG_END.sub('', text)
    text = _DANGLING_TAG_START.sub('', text)
    text = _ENTITY.sub(' ', decode_entities(text))
    text = _WHITESPACE.sub(' ', text)
    text = text.strip(_EDGE_PUNCTUATION)
    return text or None


def field_value(value) -> str:
    """A cleaned value, or NOT_FOUND in place of anything blank."""
    text = clean_text(value)
    if text is None or text.lower() == NOT_FOUND:
        return NOT_FOUND
    return text


def canonical_workplace_type(value: str) -> str:
    if value == NOT_FOUND:
        return value
    return _WORKPLACE_TYPES.get(value.lower(), value)


def coerce_status(value) -> Optional[Status]:
    """Map a free-text status token onto ``Status``; None if it has no match.

    Used for text an extractor picked up, never for a status the user set.
    """
    if value is None:
        return None
    if isinstance(value, Status):
        return value
    token = _WHITESPACE.sub('_', str(value).strip().lower()).replace('-', '_')
    return _STATUS_ALIASES.get(token)


def parse_status(value) -> Optional[Status]:
    """Strict status check for user input: only exact enum values pass."""
    if value is None or isinstance(value, Status):
        return value
    try:
        return Status(value)
    except ValueError:
        raise RecordValidationError(
            f'Invalid status {value!r}',
            errors={'status': [f'Must be one of: {Status.values()}']},
        ) from None


def normalize(draft: ApplicationRecord) -> ApplicationRecord:
    """Return a cleaned copy of ``draft``.

    Every extracted field comes back as a trimmed non-empty string or
    NOT_FOUND. Notes are user text and only lose surrounding whitespace.
    """
    changes = {name: field_value(getattr(draft, name)) for name in EXTRACTED_FIELDS}
    changes['workplace_type'] = canonical_workplace_type(changes['workplace_type'])
    changes['notes'] = (draft.notes or '').strip()
    changes['website'] = clean_text(draft.website)
    if draft.status is not None and not isinstance(draft.status, Status):
        changes['status'] = coerce_status(draft.status)
    return replace(draft, **changes)
