"""Search stored applications by company, position or any text field."""

from sqlalchemy import and_, or_

from jobapps.errors import RecordValidationError
from jobapps.models import JobApplication, NOT_FOUND, SearchMode, TEXT_FIELDS

# Columns each mode matches against
MODE_COLUMNS = {
    SearchMode.COMPANY: ('company',),
    SearchMode.POSITION: ('position',),
    SearchMode.FULL_TEXT: TEXT_FIELDS,
}

# Spellings accepted besides the enum values
MODE_ALIASES = {
    'fulltext': SearchMode.FULL_TEXT,
}


def resolve_mode(mode) -> SearchMode:
    if isinstance(mode, SearchMode):
        return mode
    token = str(mode).strip().lower().replace('-', '_')
    if token in MODE_ALIASES:
        return MODE_ALIASES[token]
    try:
        return SearchMode(token)
    except ValueError:
        raise RecordValidationError(
            f'Invalid search mode {mode!r}',
            errors={'mode': [f'Must be one of: {SearchMode.values()}']},
        ) from None


def escape_like(term):
    return term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def match_condition(term, mode):
    """Case-insensitive substring match of ``term`` on the mode's columns.

    A field holding the NOT_FOUND placeholder never matches.
    """
    pattern = f'%{escape_like(term)}%'
    clauses = []
    for name in MODE_COLUMNS[mode]:
        column = getattr(JobApplication, name)
        clauses.append(and_(column != NOT_FOUND, column.ilike(pattern, escape='\\')))
    return or_(*clauses)


class SearchEngine:
    """Scans the record store; results are most recently applied first."""

    def __init__(self, store):
        self.store = store

    def search(self, term, mode=SearchMode.COMPANY):
        mode = resolve_mode(mode)
        term = (term or '').strip()
        if not term:
            return []
        return self.store.find(match_condition(term, mode))
