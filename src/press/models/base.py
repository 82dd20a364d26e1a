from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for TIMESTAMP columns).

    Database columns use TIMESTAMP WITHOUT TIME ZONE, so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
