"""Data models for shortened URLs and their click analytics.

Classes:
    ClickEventModel:
        One recorded visit of a short URL.
    UrlRecordModel:
        One shortening: target URL, shortcode, expiry window and click history.
    RegistryStatsModel:
        Aggregate counters over every record held by the registry.

All models are frozen. The registry swaps records with `dataclasses.replace()`
on every mutation, so a record handed to a caller is a snapshot that cannot be
used to bypass the registry.

Example:
    >>> from datetime import datetime, timedelta, UTC
    >>> now = datetime.now(UTC)
    >>> record = UrlRecordModel(
    ...     id='0f1e2d3c',
    ...     original_url='https://example.com/article/123',
    ...     shortcode='abc123',
    ...     is_custom=False,
    ...     created_at=now,
    ...     validity_minutes=30,
    ...     expires_at=now + timedelta(minutes=30),
    ... )
    >>> record.click_count
    0
    >>> record.is_expired_at(now + timedelta(minutes=31))
    True
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClickEventModel:
    """Represent a single visit of a short URL.

    Attributes:
        id (str):
            Unique identifier of the click.
        timestamp (datetime):
            Moment the click was recorded (UTC).
        source (str):
            Free-text origin tag, e.g. 'direct'.
        location (str):
            Best-effort coarse location label. This is simulated and carries
            no accuracy guarantee.
        user_agent (str):
            Client-supplied user agent string.
    """
    id: str
    timestamp: datetime
    source: str
    location: str
    user_agent: str


@dataclass(frozen=True)
class UrlRecordModel:
    """Represent a shortened URL mapping with expiry and click analytics.

    Attributes:
        id (str):
            Opaque unique identifier assigned at creation.
        original_url (str):
            The absolute URL the shortcode redirects to.
        shortcode (str):
            3-12 alphanumeric characters, unique within the registry.
        is_custom (bool):
            True if the shortcode was supplied by the caller.
        created_at (datetime):
            Creation time (UTC).
        validity_minutes (int):
            Length of the validity window in minutes.
        expires_at (datetime):
            created_at + validity_minutes, fixed at creation.
        expired (bool):
            Cached expiry flag. Once True it never reverts.
        clicks (tuple[ClickEventModel, ...]):
            Recorded visits in the order they happened.
    """
    id: str
    original_url: str
    shortcode: str
    is_custom: bool
    created_at: datetime
    validity_minutes: int
    expires_at: datetime
    expired: bool = False
    clicks: tuple[ClickEventModel, ...] = ()

    @property
    def click_count(self) -> int:
        return len(self.clicks)

    def is_expired_at(self, moment: datetime) -> bool:
        """True if the flag is already set or `moment` is past `expires_at`."""
        return self.expired or moment > self.expires_at


@dataclass(frozen=True)
class RegistryStatsModel:
    """Aggregate registry counters.

    Attributes:
        total (int): number of records.
        active (int): records that have not expired.
        expired (int): records past their validity window.
        total_clicks (int): clicks recorded across all records.
    """
    total: int
    active: int
    expired: int
    total_clicks: int
