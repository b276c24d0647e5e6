"""Total parsers for inbound payload fields.

Every function here returns a defined value for any input. Malformed or
missing optional fields fall back to a documented default instead of
rejecting the request, so the webhook never bounces a signal over a typo.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

from trading_journal.models.signal import SignalAction
from trading_journal.utils.constants import ANONYMOUS, DEFAULT_TICKER

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)


def parse_optional_float(value: Any) -> float | None:
    """Finite float from a number or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_float(value: Any, default: float = 0.0) -> float:
    number = parse_optional_float(value)
    return default if number is None else number


def parse_ticker(value: Any) -> str:
    if value is None:
        return DEFAULT_TICKER
    text = str(value).strip()
    return text or DEFAULT_TICKER


def parse_action(value: Any) -> SignalAction:
    """buy/sell, case-insensitive. Anything else is treated as buy."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return SignalAction.BUY
    text = str(value).strip().lower()
    try:
        return SignalAction(text)
    except ValueError:
        logger.warning(f"Unrecognized signal action {value!r}; defaulting to buy")
        return SignalAction.BUY


def parse_timestamp(value: Any, default: datetime) -> datetime:
    """ISO-8601 string, datetime or unix epoch (s or ms) to aware UTC.

    Naive values are taken as UTC; anything unparseable yields ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str) and not value.strip():
        return default
    try:
        parsed = _datetime_adapter.validate_python(value)
    except ValidationError:
        logger.debug(f"Unparseable timestamp {value!r}; using arrival time")
        return default
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_identity(value: Any) -> str:
    """Identity strings are kept raw; only a missing or blank one becomes Anonymous."""
    if value is None:
        return ANONYMOUS
    text = str(value)
    return text if text.strip() else ANONYMOUS


def parse_credential(value: Any) -> str | None:
    """A presented token as text, or None when nothing usable was sent.

    Only non-blank strings and non-zero numbers count; booleans, zero,
    containers and null are treated as missing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, (int, float)) and value:
        return str(value)
    return None
