"""Turn pasted job-posting text into a draft application record.

Each supported platform has its own rule set. The rule sets are a closed
group selected by ``Platform``; there is no auto-detection, the caller
always names the platform the text came from.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from jobapps.errors import EmptyInputError, UnsupportedPlatformError
from jobapps.models.enums import Platform, Status
from jobapps.models.record import ApplicationRecord, EXTRACTED_FIELDS, NOT_FOUND
from jobapps.services.markup import (
    clean_html_tags,
    html_to_text,
    looks_like_markup,
    split_clipboard_blob,
)
from jobapps.services.normalizer import normalize

# "$120,000 - $150,000", "$55/hr", "$120K to $140K/yr"
_AMOUNT = r'\$\s?\d[\d,]*(?:\.\d+)?\s?[KkMm]?(?:\s*/\s*(?:yr|year|hr|hour|mo|month))?'
SALARY_PATTERN = re.compile(rf'{_AMOUNT}(?:\s*(?:-|–|—|to)\s*{_AMOUNT})?')

WORKPLACE_PATTERN = re.compile(r'\b(remote|hybrid|on[\s-]?site|in[\s-]office)\b', re.IGNORECASE)


@dataclass
class ExtractionReport:
    """Which fields an extractor resolved for one posting."""

    platform: Platform
    found: Dict[str, bool] = field(default_factory=dict)

    @property
    def missing(self) -> List[str]:
        return [name for name in EXTRACTED_FIELDS if not self.found.get(name)]

    @property
    def complete(self) -> bool:
        return not self.missing

    def to_dict(self):
        return {
            'platform': self.platform.value,
            'found': dict(self.found),
            'missing': self.missing,
        }


class Extractor:
    """Rule set for one platform.

    Subclasses implement ``find_fields`` and return whatever raw values they
    located; missing keys mean "not found".
    """

    platform: Platform

    def find_fields(self, text: str, url: Optional[str]) -> Dict[str, str]:
        raise NotImplementedError

    def extract(self, raw_text: str) -> Tuple[ApplicationRecord, ExtractionReport]:
        text, url = split_clipboard_blob(raw_text)
        values = self.find_fields(text, url)

        draft = ApplicationRecord(
            status=Status.SUBMITTED,
            website=url,
            platform=self.platform.value,
        )
        for name in EXTRACTED_FIELDS:
            value = values.get(name)
            if value:
                setattr(draft, name, value)

        draft = normalize(draft)
        report = ExtractionReport(
            platform=self.platform,
            found={name: getattr(draft, name) != NOT_FOUND for name in EXTRACTED_FIELDS},
        )
        return draft, report


def first_salary(text: str) -> Optional[str]:
    match = SALARY_PATTERN.search(text)
    return match.group(0) if match else None


def workplace_token(text: str) -> Optional[str]:
    match = WORKPLACE_PATTERN.search(text or '')
    return match.group(1) if match else None


class LinkedInExtractor(Extractor):
    """LinkedIn job view, pasted as visible text or as page markup."""

    platform = Platform.LINKEDIN

    LABELS = {
        'company': re.compile(r'company(?: name)?|employer|organi[sz]ation', re.IGNORECASE),
        'position': re.compile(r'position|job title|title|role', re.IGNORECASE),
        'location': re.compile(r'(?:job )?location', re.IGNORECASE),
        'salary_range': re.compile(r'salary(?: range)?|pay(?: range)?|base pay|compensation', re.IGNORECASE),
        'workplace_type': re.compile(r'workplace(?: type)?|work type|work arrangement', re.IGNORECASE),
    }
    LABEL_LINE = re.compile(r'^\s*(?P<label>[A-Za-z][A-Za-z ]{0,30}?)\s*:\s*(?P<value>.*)$')

    WORKPLACE_ANCHOR = re.compile(
        r'Matches your job preferences, workplace type is\s*(?P<value>[^.\n]+)', re.IGNORECASE
    )

    # Top-card class names in the job view markup
    CARD_ANCHORS = {
        'company': re.compile(
            r'<div[^>]*class="[^"]*top-card__company-name[^"]*"[^>]*>(.*?)</div>',
            re.DOTALL | re.IGNORECASE,
        ),
        'position': re.compile(
            r'<(h1|div)[^>]*class="[^"]*top-card__job-title[^"]*"[^>]*>(.*?)</\1>',
            re.DOTALL | re.IGNORECASE,
        ),
        'location': re.compile(
            r'<div[^>]*class="[^"]*top-card__(?:tertiary|primary)-description[^"]*"[^>]*>(.*?)</div>',
            re.DOTALL | re.IGNORECASE,
        ),
    }

    NOISE_LINES = {'share', 'show more options', 'save', 'apply', 'easy apply', 'promoted'}

    def find_fields(self, text, url):
        markup = looks_like_markup(text)
        values = self._from_card_markup(text) if markup else {}
        lines = self._visible_lines(html_to_text(text) if markup else text)

        # Positional top card only applies to plain pasted text that opens
        # with unlabelled lines; it wins over labels further down the post.
        if not markup and lines and not self._is_label_line(lines[0]):
            for name, value in self._from_top_card(lines).items():
                values.setdefault(name, value)

        for name, value in self._from_labels(lines).items():
            values.setdefault(name, value)

        visible = '\n'.join(lines)
        if 'salary_range' not in values:
            salary = first_salary(visible)
            if salary:
                values['salary_range'] = salary

        if 'workplace_type' not in values:
            anchor = self.WORKPLACE_ANCHOR.search(visible)
            if anchor:
                values['workplace_type'] = anchor.group('value')
            else:
                token = workplace_token(values.get('location'))
                if token:
                    values['workplace_type'] = token
        return values

    def _visible_lines(self, text):
        lines = []
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.lower() in self.NOISE_LINES:
                continue
            lines.append(stripped)
        return lines

    def _label_for(self, label):
        for name, pattern in self.LABELS.items():
            if pattern.fullmatch(label.strip()):
                return name
        return None

    def _from_labels(self, lines):
        """Capture the text run after each recognised "Label:"."""
        values = {}
        for i, line in enumerate(lines):
            match = self.LABEL_LINE.match(line)
            if not match:
                continue
            name = self._label_for(match.group('label'))
            if name is None or name in values:
                continue
            value = match.group('value').strip()
            if not value and i + 1 < len(lines):
                following = self.LABEL_LINE.match(lines[i + 1])
                if not (following and self._label_for(following.group('label'))):
                    value = lines[i + 1]
            values[name] = value
        return values

    def _is_label_line(self, line):
        """Any "Label: value" shaped line, known label or not."""
        return self.LABEL_LINE.match(line) is not None

    def _from_top_card(self, lines):
        """Company, title and location are the leading unlabelled lines."""
        card = []
        for line in lines[:3]:
            if self._is_label_line(line):
                break
            card.append(line)
        lines = card

        values = {}
        if len(lines) > 0:
            values['company'] = lines[0]
        if len(lines) > 1:
            values['position'] = lines[1]
        if len(lines) > 2:
            values['location'] = lines[2].split('·')[0]
        return values

    def _from_card_markup(self, html):
        values = {}
        for name, pattern in self.CARD_ANCHORS.items():
            match = pattern.search(html)
            if not match:
                continue
            value = clean_html_tags(match.group(match.lastindex))
            if name == 'location':
                value = value.split('·')[0]
            if value.strip():
                values[name] = value
        return values


class GreenhouseExtractor(Extractor):
    """Greenhouse hosted job board page markup."""

    platform = Platform.GREENHOUSE

    TITLE_PATTERNS = [
        re.compile(r'<div[^>]*class="[^"]*job__title[^"]*"[^>]*>.*?<h1[^>]*>(.*?)</h1>', re.DOTALL),
        re.compile(r'<h1[^>]*class="[^"]*app-title[^"]*"[^>]*>(.*?)</h1>', re.DOTALL),
    ]
    LOCATION_PATTERNS = [
        re.compile(r'<div[^>]*class="[^"]*job__location[^"]*"[^>]*>.*?<div[^>]*>(.*?)</div>', re.DOTALL),
        re.compile(r'<div[^>]*class="location"[^>]*>(.*?)</div>', re.DOTALL),
    ]
    COMPANY_PATTERNS = [
        re.compile(r'<img[^>]*alt="([^"]*?)\s+Logo"'),
        re.compile(r'<span[^>]*class="[^"]*company-name[^"]*"[^>]*>\s*(?:at\s+)?(.*?)</span>', re.DOTALL),
    ]
    PAGE_TITLE = re.compile(r'<title>\s*Job Application for\s+(.*?)\s+at\s+(.*?)\s*</title>', re.DOTALL)
    BOARD_URL = re.compile(r'https?://(?:job-boards|boards)(?:\.eu)?\.greenhouse\.io/([^/?#\s]+)')
    RANGE_PATTERNS = [
        re.compile(r'\$(\d+(?:,\d{3})*)\s*-\s*\$(\d+(?:,\d{3})*)'),
        re.compile(r'\$(\d+(?:,\d{3})*)\s+to\s+\$(\d+(?:,\d{3})*)'),
    ]

    def find_fields(self, text, url):
        values = {}

        position = self._first(self.TITLE_PATTERNS, text)
        location = self._first(self.LOCATION_PATTERNS, text)
        company = self._first(self.COMPANY_PATTERNS, text)

        page_title = self.PAGE_TITLE.search(text)
        if page_title:
            position = position or clean_html_tags(page_title.group(1))
            company = company or clean_html_tags(page_title.group(2))

        if not company:
            board = self.BOARD_URL.search(url or text)
            if board:
                company = board.group(1).replace('-', ' ').title()

        if position:
            values['position'] = position
        if location:
            values['location'] = location
            token = workplace_token(location)
            if token:
                values['workplace_type'] = token
        if company:
            values['company'] = company

        salary = self._salary_ranges(text)
        if salary:
            values['salary_range'] = salary
        return values

    @staticmethod
    def _first(patterns, text):
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                value = clean_html_tags(match.group(1))
                if value:
                    return value
        return None

    def _salary_ranges(self, text):
        """Every distinct dollar range on the page, in order of appearance."""
        found = []
        for pattern in self.RANGE_PATTERNS:
            for match in pattern.finditer(text):
                found.append((match.start(), f'${match.group(1)} - ${match.group(2)}'))
        ranges = []
        for _, value in sorted(found):
            if value not in ranges:
                ranges.append(value)
        return ', '.join(ranges)


EXTRACTORS = {
    Platform.LINKEDIN: LinkedInExtractor(),
    Platform.GREENHOUSE: GreenhouseExtractor(),
}


def resolve_platform(platform) -> Platform:
    """Map a platform tag onto ``Platform``, case-insensitively."""
    if isinstance(platform, Platform):
        return platform
    try:
        return Platform(str(platform or '').strip().lower())
    except ValueError:
        raise UnsupportedPlatformError(
            f'Unsupported platform {platform!r}. Must be one of: {Platform.values()}'
        ) from None


def extract(raw_text: str, platform) -> Tuple[ApplicationRecord, ExtractionReport]:
    """Extract a draft record from pasted posting text.

    Fields that cannot be located come back as ``NOT_FOUND``; only an
    unknown platform or blank input is an error.
    """
    extractor = EXTRACTORS[resolve_platform(platform)]
    if raw_text is None or not raw_text.strip():
        raise EmptyInputError('Posting text is empty')
    return extractor.extract(raw_text)
