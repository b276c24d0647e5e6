"""Errors raised by the journal services and mapped to responses by the API."""


class JournalError(Exception):
    """Base class for expected, caller-facing failures."""


class AuthenticationRequired(JournalError):
    def __init__(self):
        super().__init__("Authentication token required")


class InvalidCredential(JournalError):
    def __init__(self):
        super().__init__("Invalid authentication token")


class SignalNotFound(JournalError):
    def __init__(self, signal_id: int | str):
        self.signal_id = signal_id
        super().__init__(f"Signal {signal_id} not found")


class SignalAlreadyAnalyzed(JournalError):
    def __init__(self, signal_id: int | str, analyzed_by: str | None = None):
        self.signal_id = signal_id
        self.analyzed_by = analyzed_by
        super().__init__(f"Signal {signal_id} already analyzed by {analyzed_by}")
