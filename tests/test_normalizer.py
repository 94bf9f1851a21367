"""
Tests for record normalization and status validation
"""
import pytest

from jobapps.errors import RecordValidationError
from jobapps.models import ApplicationRecord, NOT_FOUND, Platform, SearchMode, Status
from jobapps.services.normalizer import (
    clean_text,
    coerce_status,
    field_value,
    normalize,
    parse_status,
)


class TestCleanText:
    """Tests for whitespace, markup and punctuation cleanup"""

    def test_collapses_whitespace(self):
        assert clean_text("  Acme \n\t  Corp  ") == "Acme Corp"

    def test_strips_tags(self):
        assert clean_text("<b>Acme</b> Corp") == "Acme Corp"

    def test_strips_dangling_tag_fragments(self):
        assert clean_text("Acme Corp</a") == "Acme Corp"
        assert clean_text('class="name">Acme Corp') == "Acme Corp"

    def test_decodes_entities(self):
        assert clean_text("AT&amp;T") == "AT&T"

    def test_trims_label_punctuation(self):
        assert clean_text(": Acme Corp ·") == "Acme Corp"
        assert clean_text("- Remote |") == "Remote"

    def test_keeps_inner_punctuation(self):
        assert clean_text("Acme, Inc.") == "Acme, Inc."

    def test_blank_is_none(self):
        assert clean_text("  :  ") is None
        assert clean_text(None) is None


class TestFieldValue:
    def test_blank_becomes_sentinel(self):
        assert field_value("") == NOT_FOUND
        assert field_value(None) == NOT_FOUND

    def test_sentinel_is_canonical(self):
        assert field_value("Not Found") == NOT_FOUND


class TestStatus:
    """Tests for lenient extraction mapping and strict user input"""

    @pytest.mark.parametrize('token, expected', [
        ('Applied', Status.SUBMITTED),
        ('Phone Screen', Status.PHONE_SCREEN),
        ('on-site interview', Status.ON_SITE_INTERVIEW),
        ('Video interview', Status.REMOTE_INTERVIEW),
        ('REJECTED', Status.REJECTED),
    ])
    def test_coerce_known_tokens(self, token, expected):
        assert coerce_status(token) == expected

    def test_coerce_unknown_token(self):
        assert coerce_status('interviewing') is None

    def test_enum_values(self):
        assert Status.values() == [
            'SUBMITTED', 'REJECTED', 'PHONE_SCREEN', 'REMOTE_INTERVIEW', 'ON_SITE_INTERVIEW',
        ]
        assert Platform.values() == ['linkedin', 'greenhouse']
        assert SearchMode.values() == ['company', 'position', 'full_text']

    def test_parse_accepts_enum_values(self):
        assert parse_status('REMOTE_INTERVIEW') == Status.REMOTE_INTERVIEW
        assert parse_status(None) is None

    def test_parse_rejects_everything_else(self):
        with pytest.raises(RecordValidationError) as exc:
            parse_status('INTERVIEWING')
        assert 'status' in exc.value.errors

    def test_parse_does_not_coerce_aliases(self):
        with pytest.raises(RecordValidationError):
            parse_status('Applied')


class TestNormalize:
    def test_every_field_filled(self):
        draft = normalize(ApplicationRecord(company=" Acme ", position="", location=None, notes=None))

        assert draft.company == "Acme"
        assert draft.position == NOT_FOUND
        assert draft.location == NOT_FOUND
        assert draft.notes == ''

    def test_workplace_type_canonical(self):
        assert normalize(ApplicationRecord(workplace_type="on site")).workplace_type == "On-site"
        assert normalize(ApplicationRecord(workplace_type="REMOTE")).workplace_type == "Remote"
        assert normalize(ApplicationRecord(workplace_type="Flexible")).workplace_type == "Flexible"

    def test_returns_copy(self):
        draft = ApplicationRecord(company=" Acme ")
        normalize(draft)
        assert draft.company == " Acme "

    def test_idempotent(self):
        once = normalize(ApplicationRecord(company="<i>Acme</i>  Corp:", salary_range="$1 - $2"))
        assert normalize(once) == once
