"""Tests for the lenient payload parsers and the response-time function."""

from datetime import datetime, timedelta, timezone

import pytest

from trading_journal.models.signal import SignalAction
from trading_journal.utils.clock import response_time_seconds
from trading_journal.utils.parsing import (
    parse_action,
    parse_credential,
    parse_float,
    parse_identity,
    parse_optional_float,
    parse_ticker,
    parse_timestamp,
)

ARRIVAL = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# 1. Numbers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        (1.085, 1.085),
        (3, 3.0),
        ("1.0850", 1.085),
        (" 42 ", 42.0),
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
        ([1], 0.0),
        (int("9" * 400), 0.0),
    ],
)
def test_parse_float_defaults_to_zero(raw, expected):
    assert parse_float(raw) == expected


def test_parse_float_custom_default():
    assert parse_float("n/a", default=-1.0) == -1.0


def test_parse_optional_float_huge_integer_is_none():
    assert parse_optional_float(10**400) is None


def test_parse_optional_float_keeps_none():
    assert parse_optional_float(None) is None
    assert parse_optional_float("oops") is None
    assert parse_optional_float("0") == 0.0


# ---------------------------------------------------------------------------
# 2. Text fields
# ---------------------------------------------------------------------------

class TestTicker:
    def test_missing_is_unknown(self):
        assert parse_ticker(None) == "UNKNOWN"

    def test_blank_is_unknown(self):
        assert parse_ticker("   ") == "UNKNOWN"

    def test_value_is_stripped(self):
        assert parse_ticker(" EURUSD ") == "EURUSD"


class TestAction:
    def test_missing_defaults_to_buy(self):
        assert parse_action(None) is SignalAction.BUY

    def test_case_insensitive(self):
        assert parse_action("SELL") is SignalAction.SELL
        assert parse_action(" Buy ") is SignalAction.BUY

    def test_unrecognized_defaults_to_buy_with_warning(self, caplog):
        assert parse_action("hold") is SignalAction.BUY
        assert "Unrecognized signal action 'hold'" in caplog.text


class TestIdentity:
    def test_missing_is_anonymous(self):
        assert parse_identity(None) == "Anonymous"
        assert parse_identity("") == "Anonymous"
        assert parse_identity("  ") == "Anonymous"

    def test_identity_kept_raw(self):
        assert parse_identity(" alice ") == " alice "


# ---------------------------------------------------------------------------
# 3. Timestamps
# ---------------------------------------------------------------------------

class TestTimestamp:
    def test_missing_uses_default(self):
        assert parse_timestamp(None, default=ARRIVAL) == ARRIVAL
        assert parse_timestamp("", default=ARRIVAL) == ARRIVAL

    def test_garbage_uses_default(self):
        assert parse_timestamp("{{timenow}}", default=ARRIVAL) == ARRIVAL

    def test_iso_with_zulu(self):
        parsed = parse_timestamp("2024-03-01T09:29:58Z", default=ARRIVAL)
        assert parsed == ARRIVAL - timedelta(seconds=2)
        assert parsed.tzinfo is not None

    def test_naive_iso_is_utc(self):
        parsed = parse_timestamp("2024-03-01T09:30:00", default=ARRIVAL)
        assert parsed == ARRIVAL

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2024-03-01T10:30:00+01:00", default=ARRIVAL)
        assert parsed == ARRIVAL
        assert parsed.utcoffset() == timedelta(0)

    def test_epoch_seconds_and_millis(self):
        epoch = int(ARRIVAL.timestamp())
        assert parse_timestamp(epoch, default=None) == ARRIVAL
        assert parse_timestamp(epoch * 1000, default=None) == ARRIVAL


# ---------------------------------------------------------------------------
# 4. Response time
# ---------------------------------------------------------------------------

def test_response_time_keeps_sub_second_precision():
    later = ARRIVAL + timedelta(seconds=2, milliseconds=500)
    assert response_time_seconds(ARRIVAL, later) == 2.5


def test_response_time_never_negative(caplog):
    earlier = ARRIVAL - timedelta(seconds=1)
    assert response_time_seconds(ARRIVAL, earlier) == 0.0
    assert "Clock went backwards" in caplog.text


# ---------------------------------------------------------------------------
# 5. Credentials
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("raw", [None, "", "   ", False, True, 0, 0.0, [], {}, ["t"]])
def test_parse_credential_missing(raw):
    assert parse_credential(raw) is None


@pytest.mark.parametrize("raw, expected", [("t", "t"), (" t ", " t "), (1234, "1234")])
def test_parse_credential_presented(raw, expected):
    assert parse_credential(raw) == expected
