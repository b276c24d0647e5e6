"""Shared constants and defaults."""

DEFAULT_TICKER = "UNKNOWN"
ANONYMOUS = "Anonymous"

# Canned payload used by the test webhook
TEST_SIGNAL = {
    "ticker": "EURUSD",
    "action": "buy",
    "price": 1.0850,
    "auth_token": "test-token",
}
