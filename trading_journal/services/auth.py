"""Webhook shared-secret check."""

import hmac

from trading_journal.config import settings
from trading_journal.services.errors import InvalidCredential


def webhook_token_matches(token: str, secret: str | None = None) -> bool:
    """Constant-time compare against the configured secret.

    With no secret configured every presented token is accepted.
    """
    expected = settings.webhook_secret if secret is None else secret
    if not expected:
        return True
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


def verify_webhook_token(token: str, secret: str | None = None):
    """Raise InvalidCredential unless ``token`` matches the configured secret."""
    if not webhook_token_matches(token, secret):
        raise InvalidCredential()
