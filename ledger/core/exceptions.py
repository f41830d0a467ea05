"""
Domain errors raised by the ledger services.

Each error carries the status code of the HTTP response it corresponds to,
so a caller exposing the ledger over a transport can map them directly.
"""


class LedgerError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(LedgerError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class InvalidArgumentError(LedgerError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class CapacityExceededError(LedgerError):
    """Requested seats exceed what the event currently has available."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough seats. Requested: {requested}, Available: {available}",
            409,
        )
