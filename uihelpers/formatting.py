"""Locale-aware date and currency formatting backed by Babel."""

from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from babel.dates import format_datetime
from babel.numbers import format_currency as babel_format_currency
from dateutil.parser import isoparse

from uihelpers.config import settings

DATE_PATTERN = "MMM d, yyyy, hh:mm a"
ZONED_DATE_PATTERN = "MMM dd, yyyy h:mm a"

NOT_AVAILABLE = "N/A"


def format_date(epoch_seconds: int | float | None) -> str:
    """Format Unix seconds in UTC, e.g. ``"Jan 5, 2025, 02:30 PM"``.

    Missing or zero timestamps render as ``"N/A"``.
    """
    if not epoch_seconds:
        return NOT_AVAILABLE
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return format_datetime(
        moment, DATE_PATTERN, tzinfo=timezone.utc, locale=settings.date_locale
    )


def format_datetime_for_timezone(value: datetime | str, tz: str) -> str:
    """Format an instant as wall-clock time in the IANA zone ``tz``.

    Args:
        value: Timezone-aware datetime, or an ISO-8601 string with an offset
        tz: IANA timezone name (e.g., "UTC", "Asia/Kolkata")

    Raises:
        TypeError: If ``value`` is naive or of an unsupported type
        zoneinfo.ZoneInfoNotFoundError: If ``tz`` is not a known zone
    """
    if isinstance(value, str):
        value = isoparse(value)
    if not isinstance(value, datetime):
        raise TypeError(
            f"Expected a datetime or ISO-8601 string.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if value.tzinfo is None:
        raise TypeError(
            f"Cannot localize a naive datetime: {value!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    zone = ZoneInfo(tz)
    return format_datetime(
        value.astimezone(zone), ZONED_DATE_PATTERN, tzinfo=zone,
        locale=settings.date_locale,
    )


def format_currency(
    amount: int | float | Decimal,
    currency: str | None = None,
    locale: str | None = None,
) -> str:
    """Format ``amount`` as currency, ``"₹12,34,567.50"`` with the defaults."""
    return babel_format_currency(
        amount,
        currency or settings.currency,
        locale=locale or settings.currency_locale,
    )
