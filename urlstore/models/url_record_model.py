from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Optional


@dataclass(frozen=True)
class URLRecordModel:
    """Represent a stored short key to URL mapping.

    Attributes:
        key (str):
            Unique identifier of the record. Caller-supplied keys carry the
            reserved marker ('$'), generated keys never do.
        url (str):
            Target address the key points to. Not validated.
        expire_time (Optional[datetime]):
            Moment after which the record is no longer retrievable.
            None means the record never expires.
        count (int):
            Number of recorded visits. Starts at 0.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> record = URLRecordModel(
        ...     key="$docs",
        ...     url="https://example.com/docs",
        ...     expire_time=datetime.now(UTC) + timedelta(days=30),
        ... )
        >>> record.count
        0
        >>> record.is_expired()
        False
    """

    key: str
    url: str
    expire_time: Optional[datetime] = None
    count: int = 0

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True if the record fails the expiry filter at `now`.

        The boundary is inclusive: a record whose expire_time equals `now`
        is still valid. Naive datetimes are interpreted as UTC.
        """
        if self.expire_time is None:
            return False
        now = as_utc(now if now is not None else datetime.now(UTC))
        return as_utc(self.expire_time) < now


def as_utc(moment: datetime) -> datetime:
    """Return `moment` as a timezone-aware UTC datetime (naive means UTC)."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
