"""Short-code registry and click analytics engine

The registry owns every UrlRecordModel in memory, keyed by shortcode, plus the
set of reserved shortcodes. After every mutation it mirrors the full record set
through a RegistryBaseDAO. The mirror is read exactly once, on construction.

Expiry is evaluated lazily against the wall clock on every read path
(`resolve()`, `list_urls()`, `stats()`). No background sweeping happens; a
caller that displays registry state must refresh it periodically. Flipping a
record's expiry flag is the only mutation a read path performs.

Mirror failures never reach the caller: in-memory state stays authoritative
for the rest of the process lifetime and the failure is logged.

Classes:
    UrlShortenerService:
        The registry engine.

Example:
    >>> from linkshortener.dao.file import RegistryFileDAO
    >>> service = UrlShortenerService(RegistryFileDAO('/tmp/registry.json'))
    >>> record = service.shorten('https://example.com', validity_minutes=1, custom_shortcode='abc')
    >>> service.resolve('abc').original_url
    'https://example.com'
    >>> service.record_click('abc', source='direct')
    True
    >>> service.stats()
    RegistryStatsModel(total=1, active=1, expired=0, total_clicks=1)
"""

import random
import logging
from dataclasses import replace
from datetime import timedelta
from typing import Any, NoReturn

from beartype import beartype

from linkshortener.constants import (
    CLICK_LOCATIONS,
    DEFAULT_CLICK_SOURCE,
    SHORTCODE_MAX_LENGTH,
    SHORTCODE_MIN_LENGTH,
    UNKNOWN_USER_AGENT,
    Defaults,
    LogSource,
)
from linkshortener.dao.base import RegistryBaseDAO
from linkshortener.dao.exceptions import DAOError
from linkshortener.exceptions import ConflictError, ExhaustionError, LinkShortenerError, ValidationError
from linkshortener.models import ClickEventModel, RegistryStatsModel, UrlRecordModel
from linkshortener.utils.helpers import generate_id, utcnow
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.validators import is_positive_int, is_valid_shortcode, is_valid_url


class UrlShortenerService:
    """Registry of short URLs with expiry tracking and click analytics.

    Attributes:
        dao (RegistryBaseDAO):
            Durable mirror of the registry.
        default_validity_minutes (int):
            Validity applied when a shorten request omits it.
        shortcode_length (int):
            Length of generated shortcodes. Must stay within the 3..12 range
            accepted for any shortcode (ValueError otherwise).
        max_attempts (int):
            Random draws allowed per generated shortcode before
            ExhaustionError is raised.
        rng (random.Random):
            Randomness for shortcodes and simulated click locations.
        logger (logging.Logger):
            Sink for structured log lines.
    """

    def __init__(
        self,
        dao: RegistryBaseDAO,
        *,
        default_validity_minutes: int = Defaults.VALIDITY_MINUTES,
        shortcode_length: int = Defaults.SHORTCODE_LENGTH,
        max_attempts: int = Defaults.MAX_SHORTCODE_ATTEMPTS,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ):
        if not SHORTCODE_MIN_LENGTH <= shortcode_length <= SHORTCODE_MAX_LENGTH:
            raise ValueError(
                f'shortcode_length must be between {SHORTCODE_MIN_LENGTH} and {SHORTCODE_MAX_LENGTH} (given value: {shortcode_length!r}).'
            )

        self.dao = dao
        self.default_validity_minutes = default_validity_minutes
        self.shortcode_length = shortcode_length
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)

        self._records: dict[str, UrlRecordModel] = {}
        self._reserved: set[str] = set()

        self._load()
        self._log(logging.INFO, 'UrlShortenerService initialized.', count=len(self._records))

    # -------------------------------
    # Public operations
    # -------------------------------

    def shorten(
        self,
        original_url: Any,
        validity_minutes: Any = None,
        custom_shortcode: Any = None,
    ) -> UrlRecordModel:
        """Create a new short URL

        All validation happens before the registry is touched, so a failed
        request leaves no trace.

        Args:
            original_url (str):
                Absolute URL to shorten.
            validity_minutes (int | None):
                Validity window in minutes. Defaults to `default_validity_minutes`.
            custom_shortcode (str | None):
                Caller-chosen shortcode. Empty strings count as omitted.

        Returns:
            UrlRecordModel: the created record.

        Raises:
            ValidationError:
                On an invalid URL or custom shortcode, or a validity that is
                not a positive integer or too large to compute an expiry from.
            ConflictError:
                If the custom shortcode is already reserved.
            ExhaustionError:
                If no free shortcode was drawn within `max_attempts`.
        """
        context = {
            'originalUrl': original_url,
            'validityMinutes': validity_minutes,
            'customShortcode': custom_shortcode,
        }
        self._log(logging.INFO, 'Shortening URL request.', **context)

        if not is_valid_url(original_url):
            self._reject(ValidationError('invalid URL'), context)

        if validity_minutes is None:
            validity_minutes = self.default_validity_minutes
        elif not is_positive_int(validity_minutes):
            self._reject(ValidationError('validity must be a positive integer'), context)

        now = utcnow()
        try:
            expires_at = now + timedelta(minutes=validity_minutes)
        except OverflowError:
            self._reject(ValidationError('validity is out of range'), context)

        if custom_shortcode is not None and custom_shortcode != '':
            if not is_valid_shortcode(custom_shortcode):
                self._reject(ValidationError('invalid custom code'), context)
            if custom_shortcode in self._reserved:
                self._reject(ConflictError('code already exists'), context)
            shortcode, is_custom = custom_shortcode, True
        else:
            shortcode, is_custom = self._allocate_shortcode(context), False

        record = UrlRecordModel(
            id=generate_id(),
            original_url=original_url,
            shortcode=shortcode,
            is_custom=is_custom,
            created_at=now,
            validity_minutes=validity_minutes,
            expires_at=expires_at,
        )

        self._records[shortcode] = record
        self._reserved.add(shortcode)
        self._persist()

        self._log(logging.INFO, 'URL shortened successfully.', shortcode=shortcode, originalUrl=original_url)
        return record

    @beartype
    def resolve(self, shortcode: str) -> UrlRecordModel | None:
        """Look up a shortcode

        Expired records are still returned; the caller inspects `expired`.
        The first lookup past `expires_at` flips the flag and persists it.

        Returns:
            UrlRecordModel | None: the record, or None if the code is unknown.
        """
        record = self._records.get(shortcode)
        if record is None:
            self._log(logging.WARNING, 'Short code not found.', shortcode=shortcode)
            return None

        if not record.expired and record.is_expired_at(utcnow()):
            record = self._mark_expired(record)
            self._persist()
            self._log(logging.WARNING, 'URL has expired.', shortcode=shortcode, expiresAt=record.expires_at)

        return record

    @beartype
    def record_click(self, shortcode: str, source: str = DEFAULT_CLICK_SOURCE, user_agent: str | None = None) -> bool:
        """Append a click to a live record

        Args:
            shortcode (str): shortcode that was visited.
            source (str): origin tag, 'direct' by default.
            user_agent (str | None): client descriptor, 'Unknown' when omitted.

        Returns:
            bool: False (and nothing recorded) for unknown or expired codes.
        """
        record = self.resolve(shortcode)
        if record is None or record.expired:
            self._log(logging.WARNING, 'Cannot record click for expired or missing URL.', shortcode=shortcode)
            return False

        click = ClickEventModel(
            id=generate_id(),
            timestamp=utcnow(),
            source=source,
            location=self._locate(),
            user_agent=user_agent or UNKNOWN_USER_AGENT,
        )
        self._records[shortcode] = replace(record, clicks=record.clicks + (click,))
        self._persist()

        self._log(logging.INFO, 'Click recorded.', shortcode=shortcode, clickSource=source)
        return True

    def list_urls(self) -> list[UrlRecordModel]:
        """Return every record, newest first, with expiry flags refreshed."""
        now = utcnow()
        flipped = [record for record in self._records.values() if not record.expired and record.is_expired_at(now)]
        for record in flipped:
            self._mark_expired(record)
        if flipped:
            self._persist()

        self._log(logging.DEBUG, 'Listing URLs.', count=len(self._records), newlyExpired=len(flipped))
        return sorted(self._records.values(), key=lambda record: record.created_at, reverse=True)

    @beartype
    def remove(self, shortcode: str) -> bool:
        """Delete a record and free its shortcode

        Returns:
            bool: True if a record existed.
        """
        if shortcode not in self._records:
            self._log(logging.WARNING, 'URL not found for deletion.', shortcode=shortcode)
            return False

        del self._records[shortcode]
        self._reserved.discard(shortcode)
        self._persist()

        self._log(logging.INFO, 'URL deleted.', shortcode=shortcode)
        return True

    def stats(self) -> RegistryStatsModel:
        """Compute aggregate counters against the current time."""
        now = utcnow()
        records = list(self._records.values())
        total = len(records)
        expired = sum(1 for record in records if record.is_expired_at(now))
        total_clicks = sum(record.click_count for record in records)

        stats = RegistryStatsModel(total=total, active=total - expired, expired=expired, total_clicks=total_clicks)
        self._log(logging.DEBUG, 'Computed registry stats.', total=total, expired=expired, totalClicks=total_clicks)
        return stats

    # -------------------------------
    # Internals
    # -------------------------------

    def _allocate_shortcode(self, context: dict[str, Any]) -> str:
        for _ in range(self.max_attempts):
            shortcode = generate_shortcode(self.shortcode_length, rng=self.rng)
            if shortcode not in self._reserved:
                return shortcode
        self._reject(ExhaustionError('unable to allocate code'), {**context, 'attempts': self.max_attempts})

    def _locate(self) -> str:
        # Simulated location; no IP geolocation is performed
        return self.rng.choice(CLICK_LOCATIONS)

    def _mark_expired(self, record: UrlRecordModel) -> UrlRecordModel:
        record = replace(record, expired=True)
        self._records[record.shortcode] = record
        return record

    def _persist(self) -> None:
        try:
            self.dao.save(self._records.values())
        except DAOError:
            self._log(logging.ERROR, 'Failed to persist registry snapshot.', exc_info=True, count=len(self._records))
        else:
            self._log(logging.DEBUG, 'Registry snapshot persisted.', count=len(self._records))

    def _load(self) -> None:
        try:
            records = self.dao.load()
        except DAOError:
            self._log(logging.ERROR, 'Failed to load registry snapshot. Starting empty.', exc_info=True)
            return

        now = utcnow()
        for record in records:
            if not record.expired and record.is_expired_at(now):
                record = replace(record, expired=True)
            self._records[record.shortcode] = record
            self._reserved.add(record.shortcode)
        self._log(logging.INFO, 'Registry snapshot loaded.', count=len(self._records))

    def _reject(self, error: LinkShortenerError, context: dict[str, Any]) -> NoReturn:
        self._log(logging.ERROR, str(error), errorCode=error.error_code, **context)
        raise error

    def _log(self, level: int, message: str, exc_info: bool = False, **data: Any) -> None:
        self.logger.log(level, message, exc_info=exc_info, extra={'source': LogSource.URL_SERVICE, **data})
